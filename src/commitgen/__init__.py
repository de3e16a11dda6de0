# File: src/commitgen/__init__.py
# Purpose: Generate commit messages by running a user-configured LLM command
from commitgen.config import InvocationConfig
from commitgen.core.generator import CommitMessageGenerator, check_enabled, generate_commit_message
from commitgen.core.validator import ValidatedMessage
from commitgen.errors import ClassifiedError, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "ClassifiedError",
    "CommitMessageGenerator",
    "ErrorKind",
    "InvocationConfig",
    "ValidatedMessage",
    "check_enabled",
    "generate_commit_message",
]
