# File: src/commitgen/core/generator.py
# Purpose: Generate a commit message by running the configured LLM command
from typing import Optional

import structlog

from commitgen.config import InvocationConfig
from commitgen.core.command_runner import CommandRunner
from commitgen.core.validator import ResultValidator, ValidatedMessage
from commitgen.errors import ClassifiedError, ErrorKind

logger = structlog.get_logger(__name__)

# Scripts signal soft failures on stdout while still exiting 0
UPSTREAM_ERROR_PREFIX = "error:"


def check_enabled(config: InvocationConfig) -> None:
    """Reject configs that must never reach the command runner."""
    if not config.enabled:
        logger.warning("llm_generation_disabled")
        raise ClassifiedError(ErrorKind.FEATURE_DISABLED)
    # Whitespace-only counts as unset rather than spawning a shell that prints nothing
    if not config.command.strip():
        logger.warning("llm_command_not_configured")
        raise ClassifiedError(ErrorKind.COMMAND_NOT_CONFIGURED)


class CommitMessageGenerator:
    """
    Runs one LLM command and returns one validated commit message.

    The external command is expected to:
    - inspect staged changes itself (e.g. `git diff --cached`)
    - print the commit message on stdout
    - exit non-zero, or print a line starting with `error:`, on failure

    The generator keeps no per-call state. Configuration is passed to
    every `generate` call, so instances can be shared between threads.
    """

    def __init__(
        self,
        runner_factory=CommandRunner,
        validator: Optional[ResultValidator] = None,
    ) -> None:
        self.runner_factory = runner_factory
        self.validator = validator or ResultValidator()

    def generate(self, config: InvocationConfig) -> ValidatedMessage:
        check_enabled(config)

        runner = self.runner_factory(timeout_s=config.timeout_s)
        output = runner.run(config.command)

        message = self.validator.validate(output)

        if message.text.startswith(UPSTREAM_ERROR_PREFIX):
            logger.error("llm_command_reported_error", detail=message.text)
            raise ClassifiedError(ErrorKind.UPSTREAM_REPORTED_ERROR, message.text)

        logger.debug(
            "commit_message_generated",
            length=len(message.text),
            warnings=len(message.warnings),
        )
        return message


def generate_commit_message(config: InvocationConfig) -> ValidatedMessage:
    return CommitMessageGenerator().generate(config)
