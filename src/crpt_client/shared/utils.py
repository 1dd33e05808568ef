from __future__ import annotations

import base64
from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def b64encode_text(text: str) -> str:
    """Base64-encode a str as UTF-8 and return ASCII text."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
