# env_detector/keys.py
# APP_KEY generation and substitution for .env templates.

from __future__ import annotations

import base64
import re
import secrets
from typing import Optional

from env_detector.report import UnsupportedCipherError

KEY_PATTERN = re.compile(r"^APP_KEY=(?P<key>.*)$", re.M)
KEY_PREFIX = "base64:"

CIPHER_KEY_BYTES = {
    "aes-128-cbc": 16,
    "aes-256-cbc": 32,
    "aes-128-gcm": 16,
    "aes-256-gcm": 32,
}


def key_length(cipher: str) -> int:
    try:
        return CIPHER_KEY_BYTES[(cipher or "").strip().lower()]
    except KeyError:
        raise UnsupportedCipherError(
            f"Unsupported cipher {cipher!r}; expected one of "
            + ", ".join(sorted(c.upper() for c in CIPHER_KEY_BYTES))
        ) from None


def generate_random_key(cipher: str = "AES-256-CBC") -> str:
    raw = secrets.token_bytes(key_length(cipher))
    return KEY_PREFIX + base64.b64encode(raw).decode("ascii")


def extract_key(contents: str) -> Optional[str]:
    """First APP_KEY value in `contents`, or None when the line is absent."""
    m = KEY_PATTERN.search(contents or "")
    return m.group("key") if m else None


def replace_key(key: str, template: str) -> str:
    # Callable replacement keeps backslashes in the key literal.
    return KEY_PATTERN.sub(lambda _m: f"APP_KEY={key}", template, count=1)
