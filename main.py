#!/usr/bin/env python3
# 博客发布脚本入口（源码运行）
#
# 使用方式：
#   python main.py [提交信息...]
#
# 安装后也可以直接使用 deploy 命令

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from blog_deploy.cli.main import main  # noqa: E402


if __name__ == '__main__':
    sys.exit(main())
