"""
Text <-> ASCII-code conversion.

The encoded form is a run of zero-padded decimal code points, each
followed by one space: ``"Hi"`` becomes ``"072 105 "``.

Encoding accepts any Unicode text, but decoding only accepts codes up to
127, so ``asc_to_txt(txt_to_asc(s)) == s`` holds only for ASCII ``s``.
"""

import re

from fileconv.core.errors import InvalidFormat, InvalidValue

__all__ = ["MAX_ASCII_CODE", "txt_to_asc", "asc_to_txt"]

MAX_ASCII_CODE = 127

_TOKEN_RE = re.compile(r"[0-9]+")


def txt_to_asc(text: str) -> str:
    """Encode every code point as a minimum-3-digit decimal number."""
    return "".join(f"{ord(char):03} " for char in text)


def asc_to_txt(text: str) -> str:
    """
    Decode space-separated ASCII codes back to text.

    Surrounding whitespace is ignored. Tokens are separated by exactly one
    space, so a doubled space yields an empty (invalid) token.

    Raises:
        InvalidFormat: If a token is not an unsigned decimal integer
        InvalidValue: If a code is greater than 127
    """
    stripped = text.strip()
    if not stripped:
        return ""

    chars = []
    for token in stripped.split(" "):
        if not _TOKEN_RE.fullmatch(token):
            raise InvalidFormat(f"Invalid ASCII format: {token!r} is not an unsigned integer")
        # int() refuses very long digit strings
        if len(token.lstrip("0")) > 3:
            shown = token if len(token) <= 20 else f"{token[:20]}..."
            raise InvalidValue(f"Invalid ASCII value: {shown} is above {MAX_ASCII_CODE}")
        code = int(token)
        if code > MAX_ASCII_CODE:
            raise InvalidValue(f"Invalid ASCII value: {code} is above {MAX_ASCII_CODE}")
        chars.append(chr(code))
    return "".join(chars)
