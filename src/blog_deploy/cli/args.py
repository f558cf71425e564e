# 命令行参数解析模块
#
# 主要功能：
#   - parse_args()：解析命令行参数
#   - 帮助信息生成

import argparse
from typing import List, Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deploy",
        description=(
            "构建 Hugo 博客并把生成的站点发布到托管仓库。\n"
            "提交信息可以与选项混写；以 - 开头的单词需放在 -- 之后"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  %(prog)s                         # 提交信息为 "rebuilding site <当前时间>"
  %(prog)s Fix typo                # 提交信息为 "Fix typo"
  %(prog)s -t ananke New post      # 构建时使用主题 ananke
  %(prog)s New post -b main        # 选项可以写在提交信息之后
  %(prog)s --no-force -- -v1 notes # "--" 之后的内容全部作为提交信息

执行顺序: 构建 -> 进入输出目录 -> git add -> git commit -> git push
任一步骤失败立即停止，退出码为失败命令的退出码
        """
    )

    parser.add_argument(
        'message',
        nargs='*',
        metavar='WORD',
        help='提交信息（多个单词以空格拼接）。不指定时使用 "rebuilding site <当前时间>"'
    )

    parser.add_argument(
        '--root',
        default=None,
        metavar='DIR',
        help='站点根目录（默认: BLOG_DEPLOY_ROOT 或当前目录）'
    )

    parser.add_argument(
        '--build-cmd',
        default=None,
        metavar='CMD',
        help='构建命令（默认: ./hugo）'
    )

    parser.add_argument(
        '-t', '--theme',
        default=None,
        metavar='THEME',
        help='构建时追加 "-t THEME"'
    )

    parser.add_argument(
        '-o', '--output-dir',
        default=None,
        metavar='DIR',
        help='输出目录，相对路径基于站点根目录（默认: public）'
    )

    parser.add_argument(
        '-r', '--remote',
        default=None,
        metavar='NAME',
        help='推送的远程仓库（默认: origin）'
    )

    parser.add_argument(
        '-b', '--branch',
        default=None,
        metavar='BRANCH',
        help='推送的分支（默认: master）'
    )

    parser.add_argument(
        '--no-force',
        dest='force_add',
        action='store_const',
        const=False,
        default=None,
        help='git add 时遵守 .gitignore（默认强制添加）'
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """解析命令行参数"""
    # 提交信息单词与选项可以混写，例如: deploy Add tag page -b main
    return build_parser().parse_intermixed_args(argv)
