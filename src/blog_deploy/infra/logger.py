# 日志输出模块：提供统一的日志输出功能
#
# 主要功能：
#   - log_info()：输出信息日志
#   - log_success()：输出成功日志
#   - log_error()：输出错误日志
#   - log_warning()：输出警告日志
#   - log_banner()：输出部署开始横幅
#
# 特性：
#   - 带时间戳
#   - 支持颜色输出（终端支持时启用，Windows 依赖 colorama）

import sys
from datetime import datetime

import colorama

colorama.just_fix_windows_console()

# ANSI 颜色代码
COLOR_RESET = colorama.Style.RESET_ALL
COLOR_INFO = colorama.Fore.CYAN
COLOR_SUCCESS = colorama.Fore.GREEN
COLOR_ERROR = colorama.Fore.RED
COLOR_WARNING = colorama.Fore.YELLOW


def _get_timestamp() -> str:
    """获取时间戳"""
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _use_color(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _format_message(level: str, color: str, message: str, stream) -> str:
    """格式化日志消息"""
    timestamp = _get_timestamp()
    if _use_color(stream):
        return f"{color}[{level}]{COLOR_RESET} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def _emit(level: str, color: str, message: str, stream) -> None:
    print(_format_message(level, color, message, stream), file=stream)


def log_info(message: str) -> None:
    """输出信息日志"""
    _emit("INFO", COLOR_INFO, message, sys.stdout)


def log_success(message: str) -> None:
    """输出成功日志"""
    _emit("SUCCESS", COLOR_SUCCESS, message, sys.stdout)


def log_error(message: str) -> None:
    """输出错误日志（输出到 stderr）"""
    _emit("ERROR", COLOR_ERROR, message, sys.stderr)


def log_warning(message: str) -> None:
    """输出警告日志"""
    _emit("WARNING", COLOR_WARNING, message, sys.stdout)


def log_banner(message: str) -> None:
    """输出绿色横幅（不带级别和时间戳）"""
    if _use_color(sys.stdout):
        print(f"{COLOR_SUCCESS}{message}{COLOR_RESET}")
    else:
        print(message)
