# File: src/commitgen/cli.py
# Purpose: Command line entry point: generate a commit message and optionally commit
import argparse
import sys
from typing import Optional, Sequence

import structlog

from commitgen.config import InvocationConfig, get_settings
from commitgen.core.generator import CommitMessageGenerator
from commitgen.errors import ClassifiedError, get_exit_code
from commitgen.git_commit import create_commit
from commitgen.i18n import user_message
from commitgen.infrastructure.logging.setup import setup_logging

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitgen",
        description="Generate a commit message by running the configured LLM command",
    )
    parser.add_argument("--command", help="Shell command to run (overrides LLM_COMMAND)")
    toggle = parser.add_mutually_exclusive_group()
    toggle.add_argument("--enable", dest="enabled", action="store_true", default=None,
                        help="Enable generation (overrides LLM_ENABLED)")
    toggle.add_argument("--disable", dest="enabled", action="store_false", default=None,
                        help="Disable generation (overrides LLM_ENABLED)")
    parser.add_argument("--timeout", type=int, help="Deadline in seconds (overrides LLM_TIMEOUT_S)")
    parser.add_argument("--commit", action="store_true", help="Commit staged changes with the message")
    parser.add_argument("--repo", default=".", help="Repository path used with --commit")
    parser.add_argument("--lang", choices=["en", "zh"], help="Language for error text")
    parser.add_argument("--log-level", help="Logging level (overrides LOG_LEVEL)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout < 1:
        parser.error("--timeout must be at least 1 second")
    settings = get_settings()

    setup_logging(
        log_level=args.log_level or settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR or None,
        json_output=settings.LOG_JSON,
    )
    language = args.lang or settings.LANGUAGE

    base = settings.invocation_config()
    config = InvocationConfig(
        enabled=base.enabled if args.enabled is None else args.enabled,
        command=base.command if args.command is None else args.command,
        timeout_s=args.timeout or base.timeout_s,
    )

    try:
        message = CommitMessageGenerator().generate(config)
    except ClassifiedError as exc:
        print(f"Error: {user_message(exc, language)}", file=sys.stderr)
        return get_exit_code(exc.kind)

    if not args.commit:
        print(message.text)
        return 0

    result = create_commit(message.text, repository_path=args.repo, timeout_s=config.timeout_s)
    if not result["ok"]:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    if result["stdout"]:
        print(result["stdout"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
