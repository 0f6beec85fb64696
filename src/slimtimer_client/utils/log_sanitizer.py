"""
Log sanitization utilities to keep credentials and PII out of logs.

Request tracing logs the parameters sent to the service, which include the
API key, the access token and, for login, the user's email and password.
The helpers below mask those values before they reach a log record.
"""

from typing import Any, Mapping


SENSITIVE_KEYS = frozenset({'api_key', 'access_token', 'password'})


def sanitize_email(email: str) -> str:
    """
    Sanitize email address for logging by showing only domain and length.

    Args:
        email: Email address to sanitize

    Returns:
        Sanitized email representation

    Example:
        "user@example.com" -> "***@example.com (16 chars)"
    """
    if not email or '@' not in email:
        return "[invalid-email]"

    local_part, domain = email.split('@', 1)
    return f"***@{domain} ({len(email)} chars)"


def sanitize_secret(secret: str) -> str:
    """
    Sanitize an API key, token or password for logging.

    Args:
        secret: The secret value

    Returns:
        A placeholder showing only the length, or the first four characters
        for long values.
    """
    if not secret:
        return "[no-secret]"

    secret = str(secret)
    if len(secret) <= 8:
        return f"[secret] ({len(secret)} chars)"
    return f"[{secret[:4]}...] ({len(secret)} chars)"


def sanitize_params(params: Any) -> Any:
    """
    Recursively mask credentials inside a request parameter structure.

    Args:
        params: Mapping, list or scalar as sent to the service

    Returns:
        A copy of the structure with secrets and emails masked
    """
    if isinstance(params, Mapping):
        sanitized = {}
        for key, value in params.items():
            if key in SENSITIVE_KEYS:
                sanitized[key] = sanitize_secret(value)
            elif key == 'email' and isinstance(value, str):
                sanitized[key] = sanitize_email(value)
            else:
                sanitized[key] = sanitize_params(value)
        return sanitized
    if isinstance(params, list):
        return [sanitize_params(item) for item in params]
    return params


def sanitize_for_logging(**kwargs) -> dict:
    """
    Sanitize multiple fields for logging in one call.

    Args:
        **kwargs: Fields to sanitize (email, api_key, params, etc.)

    Returns:
        Dictionary with sanitized values
    """
    sanitized = {}

    for key, value in kwargs.items():
        if key == 'email':
            sanitized[key] = sanitize_email(value)
        elif key in SENSITIVE_KEYS:
            sanitized[key] = sanitize_secret(value)
        elif key == 'params':
            sanitized[key] = sanitize_params(value)
        else:
            sanitized[key] = value

    return sanitized
