# 提交信息模块：决定本次发布使用的 commit message
#
# 规则：
#   - 有参数：参数以单个空格拼接，原样使用
#   - 无参数（或拼接结果为空字符串）："rebuilding site " + 当前时间
#
# 时间格式与 `date` 命令默认输出一致，例如：Sat Oct 17 09:05:01 UTC 2026

from datetime import datetime
from typing import Callable, Optional, Sequence

DEFAULT_MESSAGE_PREFIX = "rebuilding site "

Clock = Callable[[], datetime]


def _local_now() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """按 `date` 默认格式渲染时间（日期用空格补齐两位）"""
    zone = moment.strftime("%Z")
    text = f"{moment:%a %b} {moment.day:2d} {moment:%H:%M:%S}"
    if zone:
        text += f" {zone}"
    return f"{text} {moment.year}"


def resolve_commit_message(words: Sequence[str], clock: Optional[Clock] = None) -> str:
    """根据命令行参数生成 commit message

    Args:
        words: 命令行传入的信息单词
        clock: 获取当前时间的函数（测试时可注入）

    Returns:
        最终使用的 commit message
    """
    message = " ".join(words)
    if message:
        return message

    now = (clock or _local_now)()
    return DEFAULT_MESSAGE_PREFIX + format_timestamp(now)
