# 部署步骤模块：每个步骤执行一条外部命令
#
# 主要功能：
#   - build()：执行站点构建命令（默认 ./hugo）
#   - enter_output_dir()：确认输出目录存在且是 Git 检出
#   - stage()：git add . -f（强制添加被忽略规则排除的文件，可关闭）
#   - commit()：git commit -m <message>
#   - push()：git push <remote> <branch>
#
# 特性：
#   - 不修改进程当前目录，后续命令都以输出目录作为 cwd 执行
#   - 命令输出原样回显到终端
#   - 失败时根据输出归类失败原因

import sys
from pathlib import Path
from typing import List, Optional

from .deploy_config import DeployConfig
from .process_control import is_shutdown_requested, run_tracked_command
from ..domain.models import DeployStep, StepResult
from ..infra.logger import log_error, log_info, log_success, log_warning
from ..infra.paths import is_git_checkout


def _extract_failure_reason(output_text: str) -> str:
    """Map common build/git output to concise reason tags."""
    text = (output_text or "").lower()
    if not text:
        return "unknown"
    if "nothing to commit" in text or "nothing added to commit" in text:
        return "nothing_to_commit"
    if "not a git repository" in text:
        return "not_git_repo"
    if "src refspec" in text or "couldn't find remote ref" in text or "no such remote" in text:
        return "remote_ref_missing"
    if "does not appear to be a git repository" in text:
        return "remote_ref_missing"
    if "[rejected]" in text or "non-fast-forward" in text or "fetch first" in text:
        return "rejected"
    if "could not resolve host" in text or "failed to connect" in text or "timed out" in text:
        return "network_error"
    if "authentication failed" in text or "permission denied" in text:
        return "auth_error"
    return "unknown"


def _echo_output(stdout_text: str, stderr_text: str) -> None:
    if stdout_text:
        sys.stdout.write(stdout_text)
        sys.stdout.flush()
    if stderr_text:
        sys.stderr.write(stderr_text)
        sys.stderr.flush()


def run_step(step: DeployStep, command: List[str], cwd: Optional[Path]) -> StepResult:
    """Run one step's command and turn its outcome into a ``StepResult``."""
    if is_shutdown_requested():
        log_warning(f"[{step.value}] 已取消")
        return StepResult(step, False, 130, "canceled", command)

    log_info(f"[{step.value}] {' '.join(command)}")
    try:
        returncode, stdout_text, stderr_text = run_tracked_command(command, cwd=cwd)
    except FileNotFoundError as exc:
        log_error(f"[{step.value}] 命令不存在: {command[0]} - {exc}")
        return StepResult(step, False, 127, "command_not_found", command)
    except OSError as exc:
        log_error(f"[{step.value}] 命令无法启动: {command[0]} - {exc}")
        return StepResult(step, False, 126, "command_not_executable", command)

    _echo_output(stdout_text, stderr_text)

    if is_shutdown_requested():
        log_warning(f"[{step.value}] 已取消")
        return StepResult(step, False, 130, "canceled", command)

    if returncode != 0:
        reason = _extract_failure_reason(stdout_text + "\n" + stderr_text)
        log_error(f"[{step.value}] 失败 [{reason}]，退出码 {returncode}")
        return StepResult(step, False, returncode, reason, command)

    log_success(f"[{step.value}] 完成")
    return StepResult(step, True, 0, "", command)


def build(config: DeployConfig) -> StepResult:
    """Regenerate the site into the output directory."""
    return run_step(DeployStep.BUILD, list(config.build_command), config.site_root)


def enter_output_dir(config: DeployConfig) -> StepResult:
    """Check that the output directory is a git checkout later steps can run in."""
    step = DeployStep.ENTER_OUTPUT_DIR
    output_dir = config.output_dir
    if not output_dir.is_dir():
        log_error(f"[{step.value}] 输出目录不存在: {output_dir}")
        return StepResult(step, False, 1, "output_dir_missing")
    if not is_git_checkout(output_dir):
        log_error(f"[{step.value}] 输出目录不是 Git 仓库（缺少 .git）: {output_dir}")
        return StepResult(step, False, 1, "not_git_repo")

    log_success(f"[{step.value}] 进入输出目录: {output_dir}")
    return StepResult(step, True)


def stage(config: DeployConfig) -> StepResult:
    """Stage every file in the output directory."""
    command = ["git", "add", "."]
    if config.force_add:
        # tags/ 之类的生成目录可能被全局 .gitignore 排除
        command.append("-f")
    return run_step(DeployStep.STAGE, command, config.output_dir)


def commit(config: DeployConfig, message: str) -> StepResult:
    return run_step(DeployStep.COMMIT, ["git", "commit", "-m", message], config.output_dir)


def push(config: DeployConfig) -> StepResult:
    return run_step(DeployStep.PUSH, ["git", "push", config.remote, config.branch], config.output_dir)
