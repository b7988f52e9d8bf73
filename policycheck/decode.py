"""
Input decoding shared by the CLI and the HTTP surface.

Responsibilities:
- encoding detection (charset-normalizer), UTF-8 fallback
- BOM stripping
- newline normalization to LF
"""

from __future__ import annotations

import logging
from typing import List

from charset_normalizer import from_bytes

from .rules import FALLBACK_ENCODING

logger = logging.getLogger(__name__)


def decode_input(raw: bytes) -> str:
    """
    Decode uploaded or on-disk bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - If the detected codec fails, retry as UTF-8 (BOM-aware) and let a decode error propagate.
    - A leading UTF-8 BOM is dropped.
    - CRLF/CR are normalized to LF.
    """
    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else FALLBACK_ENCODING

    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = FALLBACK_ENCODING

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        logger.warning("decode with %s failed, retrying as %s", decode_used, FALLBACK_ENCODING)
        text = raw.decode(FALLBACK_ENCODING)

    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> List[str]:
    return text.split("\n")
