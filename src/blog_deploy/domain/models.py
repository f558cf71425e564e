"""Domain data structures."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class DeployStep(str, Enum):
    """Deploy steps in execution order."""

    BUILD = "build"
    ENTER_OUTPUT_DIR = "enter_output_dir"
    STAGE = "stage"
    COMMIT = "commit"
    PUSH = "push"


DEPLOY_STEPS: List[DeployStep] = list(DeployStep)


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single deploy step."""

    step: DeployStep
    success: bool
    returncode: int = 0
    reason: str = ""
    command: List[str] = field(default_factory=list)


@dataclass
class DeployResult:
    """Outcome of a whole deploy run.

    ``steps`` holds every step that was attempted, in order; only the last
    one can be a failure.
    """

    message: str
    steps: List[StepResult] = field(default_factory=list)
    duration: int = 0

    @property
    def failed_step(self) -> Optional[StepResult]:
        if self.steps and not self.steps[-1].success:
            return self.steps[-1]
        return None

    @property
    def success(self) -> bool:
        return len(self.steps) == len(DEPLOY_STEPS) and self.failed_step is None

    @property
    def exit_code(self) -> int:
        failed = self.failed_step
        if failed is None:
            return 0 if self.success else 1
        if failed.returncode < 0:
            # 被信号终止的子进程，与 shell 一致报告 128 + 信号编号
            return 128 - failed.returncode
        return failed.returncode or 1

    @property
    def completed_steps(self) -> List[DeployStep]:
        return [result.step for result in self.steps if result.success]

    def to_dict(self) -> Dict[str, Any]:
        failed = self.failed_step
        return {
            "message": self.message,
            "completed": [step.value for step in self.completed_steps],
            "failed_step": failed.step.value if failed else "",
            "reason": failed.reason if failed else "",
            "exit_code": self.exit_code,
            "duration": self.duration,
        }
