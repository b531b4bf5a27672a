import re


def parse_bool(value: str | bool | None) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("true", "1", "yes", "on")


def sanitize_log(message: str) -> str:
    """Mask GitHub tokens and bearer credentials in log messages."""
    sanitized = re.sub(r"gh[pousr]_[A-Za-z0-9]{36,}", "***GITHUB_TOKEN***", message)
    sanitized = re.sub(
        r"Bearer\s+[A-Za-z0-9\-._~+/]+=*",
        "Bearer ***TOKEN***",
        sanitized,
    )
    return sanitized
