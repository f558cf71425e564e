"""Application service for the build-and-publish flow."""

import time
from typing import Callable, List, Optional, Sequence, Tuple

from ..core import steps
from ..core.deploy_config import DeployConfig
from ..core.process_control import clear_shutdown_request
from ..domain.message import Clock, resolve_commit_message
from ..domain.models import DeployResult, DeployStep, StepResult
from ..infra.logger import log_error, log_info

StepCallback = Callable[[StepResult], None]


def _plan(config: DeployConfig, message: str) -> List[Tuple[DeployStep, Callable[[], StepResult]]]:
    return [
        (DeployStep.BUILD, lambda: steps.build(config)),
        (DeployStep.ENTER_OUTPUT_DIR, lambda: steps.enter_output_dir(config)),
        (DeployStep.STAGE, lambda: steps.stage(config)),
        (DeployStep.COMMIT, lambda: steps.commit(config, message)),
        (DeployStep.PUSH, lambda: steps.push(config)),
    ]


def run_deploy(
    config: DeployConfig,
    words: Sequence[str] = (),
    clock: Optional[Clock] = None,
    step_cb: Optional[StepCallback] = None,
) -> DeployResult:
    """Build the site, then stage, commit and push the output checkout.

    Steps run strictly in order and the run stops at the first failure.
    Nothing is rolled back: the output directory stays as the failing step
    left it.
    """
    clear_shutdown_request()
    start_time = time.time()
    message = resolve_commit_message(words, clock)
    result = DeployResult(message=message)
    log_info(f"提交信息: {message}")

    for step, action in _plan(config, message):
        try:
            outcome = action()
        except Exception as exc:
            log_error(f"[{step.value}] 异常: {exc}")
            outcome = StepResult(step, False, 1, "exception")

        result.steps.append(outcome)
        if step_cb:
            step_cb(outcome)
        if not outcome.success:
            break

    result.duration = int(time.time() - start_time)
    return result
