# File: src/commitgen/core/__init__.py
# Purpose: Command execution and output validation
from commitgen.core.command_runner import CommandRunner, ExecutionOutcome
from commitgen.core.generator import CommitMessageGenerator, check_enabled, generate_commit_message
from commitgen.core.validator import ResultValidator, ValidatedMessage

__all__ = [
    "CommandRunner",
    "CommitMessageGenerator",
    "ExecutionOutcome",
    "ResultValidator",
    "ValidatedMessage",
    "check_enabled",
    "generate_commit_message",
]
