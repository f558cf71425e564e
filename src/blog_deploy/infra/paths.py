# 路径处理模块：提供站点目录相关的路径功能
#
# 主要功能：
#   - get_site_root()：获取站点根目录（指定路径或当前目录）
#   - resolve_output_dir()：解析输出目录（相对路径基于站点根目录）
#   - is_git_checkout()：判断目录是否为 Git 检出（含子模块）

from pathlib import Path
from typing import Optional

SITE_ROOT_ENV = "BLOG_DEPLOY_ROOT"


def get_site_root(root: Optional[str] = None) -> Path:
    """获取站点根目录

    传入路径为空时使用当前工作目录；环境变量 BLOG_DEPLOY_ROOT 由调用方解析
    """
    if root:
        return Path(root).expanduser().resolve()
    return Path.cwd().resolve()


def resolve_output_dir(site_root: Path, output_dir: str) -> Path:
    """解析输出目录，相对路径基于站点根目录"""
    path = Path(output_dir).expanduser()
    if not path.is_absolute():
        path = site_root / path
    return path


def is_git_checkout(path: Path) -> bool:
    """判断目录是否为 Git 检出

    普通仓库的 .git 是目录，子模块的 .git 是指向上级仓库的文件，两者都算
    """
    return path.is_dir() and (path / ".git").exists()
