"""Domain models and commit message rules."""

from .message import DEFAULT_MESSAGE_PREFIX, format_timestamp, resolve_commit_message
from .models import DEPLOY_STEPS, DeployResult, DeployStep, StepResult

__all__ = [
    "DEPLOY_STEPS",
    "DEFAULT_MESSAGE_PREFIX",
    "DeployResult",
    "DeployStep",
    "StepResult",
    "format_timestamp",
    "resolve_commit_message",
]
