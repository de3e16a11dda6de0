# File: src/commitgen/i18n.py
# Purpose: User-facing error text for each error kind (英文 / 中文)
from commitgen.errors import ClassifiedError, ErrorKind

DEFAULT_LANGUAGE = "en"

# Kinds whose detail is already readable text and is shown as-is
VERBATIM_KINDS = {
    ErrorKind.TIMEOUT,
    ErrorKind.COMMAND_FAILED,
    ErrorKind.UPSTREAM_REPORTED_ERROR,
}

MESSAGES: dict[str, dict[ErrorKind, str]] = {
    "en": {
        ErrorKind.FEATURE_DISABLED: "LLM commit generation is disabled in config",
        ErrorKind.COMMAND_NOT_CONFIGURED: "LLM command is not configured",
        ErrorKind.TIMEOUT: "LLM command timed out",
        ErrorKind.EXECUTION_FAILED: "Failed to execute LLM command: {detail}",
        ErrorKind.COMMAND_FAILED: "LLM command failed",
        ErrorKind.EMPTY_RESPONSE: "Empty response from LLM command",
        ErrorKind.OVERSIZED_RESPONSE: "Generated message is unreasonably large ({detail} bytes), possible script error",
        ErrorKind.INVALID_ENCODING: "Generated message contains invalid UTF-8 characters",
        ErrorKind.UPSTREAM_REPORTED_ERROR: "LLM command reported an error",
    },
    "zh": {
        ErrorKind.FEATURE_DISABLED: "配置中已禁用 LLM 提交信息生成",
        ErrorKind.COMMAND_NOT_CONFIGURED: "未配置 LLM 命令",
        ErrorKind.TIMEOUT: "LLM 命令执行超时",
        ErrorKind.EXECUTION_FAILED: "LLM 命令执行失败: {detail}",
        ErrorKind.COMMAND_FAILED: "LLM 命令失败",
        ErrorKind.EMPTY_RESPONSE: "LLM 命令返回为空",
        ErrorKind.OVERSIZED_RESPONSE: "生成的提交信息过大（{detail} 字节），脚本可能出错",
        ErrorKind.INVALID_ENCODING: "生成的提交信息包含无效的 UTF-8 字符",
        ErrorKind.UPSTREAM_REPORTED_ERROR: "LLM 命令报告了错误",
    },
}


def user_message(error: ClassifiedError, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Text shown to the user for a failed generation.

    Captured stderr, upstream `error:` text and the timeout notice are shown
    verbatim; otherwise the localized string for the kind is used.
    """
    table = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    if error.kind in VERBATIM_KINDS and error.detail:
        return error.detail
    return table[error.kind].format(detail=error.detail)
