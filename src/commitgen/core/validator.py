# File: src/commitgen/core/validator.py
# Purpose: Shape checks for the text produced by the LLM command
from dataclasses import dataclass
from typing import Tuple, Union

import structlog

from commitgen.errors import ClassifiedError, ErrorKind

logger = structlog.get_logger(__name__)

# Anything bigger is almost certainly a script dumping unrelated data
MAX_MESSAGE_BYTES = 100 * 1024
SUBJECT_SOFT_LIMIT = 72


@dataclass(frozen=True)
class ValidatedMessage:
    text: str
    warnings: Tuple[str, ...] = ()


class ResultValidator:
    """
    Validates raw command output as a commit message.

    Checks run in a fixed order and the first failure wins:
    empty, oversized, invalid UTF-8. A subject line longer than the
    conventional 72 characters only produces a warning.
    """

    def __init__(
        self,
        max_bytes: int = MAX_MESSAGE_BYTES,
        subject_limit: int = SUBJECT_SOFT_LIMIT,
    ) -> None:
        self.max_bytes = max_bytes
        self.subject_limit = subject_limit

    def validate(self, raw: Union[bytes, str]) -> ValidatedMessage:
        """
        Trim and validate command output.

        Args:
            raw: Output as returned by the command, trimmed or not

        Returns:
            The trimmed message and any advisory warnings

        Raises:
            ClassifiedError: EMPTY_RESPONSE, OVERSIZED_RESPONSE or INVALID_ENCODING
        """
        if isinstance(raw, str):
            # Lone surrogates survive the round trip and fail the UTF-8 check below
            raw = raw.encode("utf-8", errors="surrogatepass")
        # Undecodable bytes are kept as escapes so Unicode whitespace can be trimmed first
        text = raw.decode("utf-8", errors="surrogateescape").strip()

        if not text:
            logger.error("llm_empty_response")
            raise ClassifiedError(ErrorKind.EMPTY_RESPONSE)

        size = len(text.encode("utf-8", errors="surrogateescape"))
        if size > self.max_bytes:
            logger.error("llm_response_oversized", size_bytes=size, limit_bytes=self.max_bytes)
            raise ClassifiedError(ErrorKind.OVERSIZED_RESPONSE, str(size))

        try:
            text.encode("utf-8")
        except UnicodeEncodeError as exc:
            logger.error("llm_response_invalid_encoding", position=exc.start)
            raise ClassifiedError(ErrorKind.INVALID_ENCODING) from exc

        warnings = ()
        subject = text.split("\n", 1)[0]
        if len(subject) > self.subject_limit:
            logger.warning(
                "commit_subject_too_long",
                length=len(subject),
                limit=self.subject_limit,
            )
            warnings = (f"commit subject exceeds {self.subject_limit} characters: {len(subject)}",)

        return ValidatedMessage(text=text, warnings=warnings)
