"""ASCII-safe rewriting of outgoing text."""

from __future__ import annotations

from ..config import ASCII_PLACEHOLDER

_TURKISH_TO_ASCII = str.maketrans(
    {
        "ç": "c",
        "Ç": "C",
        "ğ": "g",
        "Ğ": "G",
        "ı": "i",
        "İ": "I",
        "ö": "o",
        "Ö": "O",
        "ş": "s",
        "Ş": "S",
        "ü": "u",
        "Ü": "U",
    }
)
_KEPT_CONTROLS = frozenset("\t\n\r")


def _is_safe(ch: str) -> bool:
    return " " <= ch <= "~" or ch in _KEPT_CONTROLS


def to_ascii(text: str, *, placeholder: str = ASCII_PLACEHOLDER) -> str:
    """Transliterate Turkish letters and replace anything else non-printable.

    The result only contains printable ASCII plus tab and line breaks, so
    its UTF-8 byte length equals its character length.
    """

    if len(placeholder) != 1 or not _is_safe(placeholder):
        raise ValueError("placeholder must be a single printable ASCII character")
    transliterated = text.translate(_TURKISH_TO_ASCII)
    return "".join(ch if _is_safe(ch) else placeholder for ch in transliterated)


__all__ = [
    "to_ascii",
]
