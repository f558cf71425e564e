"""Application services orchestrating domain and core capabilities."""

from .deploy import run_deploy

__all__ = [
    "run_deploy",
]
