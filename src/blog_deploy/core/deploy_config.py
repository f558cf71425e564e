"""Deploy configuration: defaults, environment overrides and validation."""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ..infra.paths import SITE_ROOT_ENV, get_site_root, resolve_output_dir

DEFAULT_BUILD_COMMAND = "./hugo"
DEFAULT_OUTPUT_DIR = "public"
DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"

ENV_BUILD_COMMAND = "BLOG_DEPLOY_BUILD_CMD"
ENV_THEME = "BLOG_DEPLOY_THEME"
ENV_OUTPUT_DIR = "BLOG_DEPLOY_OUTPUT_DIR"
ENV_REMOTE = "BLOG_DEPLOY_REMOTE"
ENV_BRANCH = "BLOG_DEPLOY_BRANCH"
ENV_FORCE_ADD = "BLOG_DEPLOY_FORCE_ADD"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when the deploy configuration is invalid."""


@dataclass(frozen=True)
class DeployConfig:
    """Where to build, what to run, and where to push."""

    site_root: Path
    build_command: List[str] = field(default_factory=lambda: [DEFAULT_BUILD_COMMAND])
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    remote: str = DEFAULT_REMOTE
    branch: str = DEFAULT_BRANCH
    force_add: bool = True

    def describe(self) -> Dict[str, str]:
        return {
            "site_root": str(self.site_root),
            "build_command": " ".join(self.build_command),
            "output_dir": str(self.output_dir),
            "remote": self.remote,
            "branch": self.branch,
            "force_add": "yes" if self.force_add else "no",
        }


def parse_bool(value: str, name: str) -> bool:
    """Parse an on/off style environment value."""
    text = value.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} 不是有效的布尔值: {value!r}")


def split_build_command(command: str, theme: Optional[str] = None) -> List[str]:
    """Split a shell-style build command and append ``-t <theme>`` when set."""
    try:
        parts = shlex.split(command)
    except ValueError as exc:
        raise ConfigError(f"构建命令无法解析: {command!r} - {exc}") from exc
    if not parts:
        raise ConfigError("构建命令为空")
    if theme:
        parts.extend(["-t", theme])
    return parts


def _pick(cli_value: Optional[str], env: Mapping[str, str], key: str, default: Optional[str]) -> Optional[str]:
    if cli_value is not None:
        return cli_value
    if env.get(key):
        return env[key]
    return default


def load_config(
    root: Optional[str] = None,
    build_command: Optional[str] = None,
    theme: Optional[str] = None,
    output_dir: Optional[str] = None,
    remote: Optional[str] = None,
    branch: Optional[str] = None,
    force_add: Optional[bool] = None,
    env: Optional[Mapping[str, str]] = None,
) -> DeployConfig:
    """Build a ``DeployConfig`` from CLI values, environment and defaults.

    CLI values win over environment variables, which win over defaults.
    ``None`` means "not given on the command line".
    """
    if env is None:
        env = os.environ

    site_root = get_site_root(_pick(root, env, SITE_ROOT_ENV, None))

    command_text = _pick(build_command, env, ENV_BUILD_COMMAND, DEFAULT_BUILD_COMMAND)
    theme_value = _pick(theme, env, ENV_THEME, None)
    command = split_build_command(command_text or "", theme_value)

    output_text = _pick(output_dir, env, ENV_OUTPUT_DIR, DEFAULT_OUTPUT_DIR)
    if not output_text or not output_text.strip():
        raise ConfigError("输出目录为空")

    remote_value = (_pick(remote, env, ENV_REMOTE, DEFAULT_REMOTE) or "").strip()
    if not remote_value:
        raise ConfigError("远程仓库名为空")

    branch_value = (_pick(branch, env, ENV_BRANCH, DEFAULT_BRANCH) or "").strip()
    if not branch_value:
        raise ConfigError("分支名为空")

    if force_add is None:
        env_force = env.get(ENV_FORCE_ADD)
        force_add = parse_bool(env_force, ENV_FORCE_ADD) if env_force else True

    return DeployConfig(
        site_root=site_root,
        build_command=command,
        output_dir=resolve_output_dir(site_root, output_text),
        remote=remote_value,
        branch=branch_value,
        force_add=force_add,
    )
