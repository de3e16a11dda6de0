# File: src/commitgen/infrastructure/logging/formatters.py
# Purpose: structlog processors that keep secrets out of log output
import re
from typing import Any, Dict


class SensitiveDataFilter:
    """
    Redact sensitive information from log events.

    LLM commands often carry credentials inline
    (`OPENAI_API_KEY=sk-... llm-commit`), so besides redacting sensitive
    keys we also mask `NAME=value` assignments inside command strings.
    """

    SENSITIVE_KEYS = {
        "password",
        "passwd",
        "secret",
        "api_key",
        "apikey",
        "token",
        "authorization",
        "private_key",
    }

    REDACTED = "***REDACTED***"

    _ASSIGNMENT = re.compile(r"(?P<name>\b[A-Za-z_][A-Za-z0-9_]*)=(?P<value>'[^']*'|\"[^\"]*\"|\S+)")
    _BEARER = re.compile(r"(?i)(bearer\s+)\S+")

    @classmethod
    def redact(cls, data: Any) -> Any:
        """
        Recursively redact sensitive data from dictionaries and lists.

        Args:
            data: Data to redact (dict, list, or primitive)

        Returns:
            Data with sensitive fields redacted
        """
        if isinstance(data, dict):
            return {
                key: cls.REDACTED if cls._is_sensitive_key(key) else cls.redact(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.redact(item) for item in data]
        elif isinstance(data, str):
            return cls.redact_text(data)
        else:
            return data

    @classmethod
    def redact_text(cls, text: str) -> str:
        """Mask inline `SECRET_NAME=value` assignments and bearer tokens"""
        def _mask(match: re.Match) -> str:
            if cls._is_sensitive_key(match.group("name")):
                return f"{match.group('name')}={cls.REDACTED}"
            return match.group(0)

        text = cls._ASSIGNMENT.sub(_mask, text)
        return cls._BEARER.sub(lambda m: m.group(1) + cls.REDACTED, text)

    @classmethod
    def _is_sensitive_key(cls, key: str) -> bool:
        """Check if a key name indicates sensitive data"""
        key_lower = str(key).lower()
        return any(sensitive in key_lower for sensitive in cls.SENSITIVE_KEYS)


def redact_sensitive(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """structlog processor applying SensitiveDataFilter to every event field."""
    return SensitiveDataFilter.redact(event_dict)


def add_source(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("_source", "commitgen")
    return event_dict
