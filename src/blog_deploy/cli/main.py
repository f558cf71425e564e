# 博客发布脚本：构建站点并推送到托管仓库
#
# 主要功能：
#   - 解析命令行参数（提交信息、构建命令、输出目录、远程和分支）
#   - 执行站点构建（默认 ./hugo）
#   - 在输出目录（托管仓库的子模块）中 add / commit / push
#   - 输出最终结果
#
# 执行流程：
#   1. 构建站点
#   2. 进入输出目录
#   3. git add . -f（可用 --no-force 关闭强制添加）
#   4. git commit -m <提交信息>
#   5. git push origin master
#
# 特性：
#   - 任一步骤失败立即停止，不回滚
#   - 退出码为失败命令自身的退出码

from typing import List, Optional

from ..application.deploy import run_deploy
from .args import parse_args
from ..core.deploy_config import ConfigError, load_config
from ..core.process_control import request_shutdown
from ..domain.models import DEPLOY_STEPS, DeployResult, StepResult
from ..infra.logger import log_banner, log_error, log_info, log_success, log_warning

BANNER = "Deploying updates to GitHub..."
INTERRUPTED_EXIT_CODE = 130
CONFIG_ERROR_EXIT_CODE = 2


def report_step(outcome: StepResult) -> None:
    """输出单个步骤的进度"""
    index = DEPLOY_STEPS.index(outcome.step) + 1
    status = "完成" if outcome.success else "失败"
    log_info(f"进度 {index}/{len(DEPLOY_STEPS)}: {outcome.step.value} {status}")


def print_summary(result: DeployResult) -> None:
    """输出最终结果

    Args:
        result: 本次部署结果
    """
    summary = result.to_dict()
    minutes = summary["duration"] // 60
    seconds = summary["duration"] % 60

    print()
    log_info("========== 发布结束 ==========")
    log_info(f"提交信息: {summary['message']}")
    log_info(f"已完成步骤: {', '.join(summary['completed']) or '无'}")

    if not summary["failed_step"]:
        log_success("发布成功")
    else:
        log_error(f"失败步骤: {summary['failed_step']} [{summary['reason']}]，退出码 {summary['exit_code']}")
        log_warning("输出目录保持失败时的状态，请手动检查后重新执行")

    log_info(f"耗时: {minutes}分钟 {seconds}秒")
    log_info("==============================")


def main(argv: Optional[List[str]] = None) -> int:
    """主函数

    Returns:
        退出码（0 成功，否则为失败步骤的退出码）
    """
    args = parse_args(argv)

    try:
        config = load_config(
            root=args.root,
            build_command=args.build_cmd,
            theme=args.theme,
            output_dir=args.output_dir,
            remote=args.remote,
            branch=args.branch,
            force_add=args.force_add,
        )
    except ConfigError as exc:
        log_error(f"配置错误: {exc}")
        return CONFIG_ERROR_EXIT_CODE

    log_banner(BANNER)
    for key, value in config.describe().items():
        log_info(f"{key}: {value}")

    try:
        result = run_deploy(config, args.message, step_cb=report_step)
    except KeyboardInterrupt:
        request_shutdown()
        log_warning("收到中断信号，已终止正在运行的命令")
        return INTERRUPTED_EXIT_CODE

    print_summary(result)
    return result.exit_code
