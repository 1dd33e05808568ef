from __future__ import annotations


def mask_token(token: str | None, visible: int = 8) -> str:
    """Return a log-safe preview of a token.

    Example:
        >>> mask_token("eyJhbGciOiJIUzI1NiJ9.payload")
        'eyJhbGci... (length: 28)'
    """
    if not token:
        return "<unset>"
    if len(token) <= visible:
        return "***"
    return f"{token[:visible]}... (length: {len(token)})"
