"""Filesystem-safe name helpers."""

import re

# Characters rejected in file names on at least one major platform
ILLEGAL_CHARS = re.compile(r'[\\/:*?"<>|]')
WHITESPACE_RUN = re.compile(r"\s+")
ELLIPSIS = "…"

DEFAULT_MAX_TITLE_LENGTH = 80

# Room for "<number>. " and ".md" within the usual 255-byte name limit;
# 80 three-byte CJK characters still fit whole
MAX_NAME_BYTES = 240


def sanitize(text: str | None) -> str:
    """Make text usable as a file name.

    Illegal path characters become ``_``, whitespace runs collapse to a
    single space and the result is stripped. ``None`` yields ``""``.

    Example:
        >>> sanitize("Memory leak in worker: pool!?")
        'Memory leak in worker_ pool!_'
    """
    if not text:
        return ""
    replaced = ILLEGAL_CHARS.sub("_", text)
    return WHITESPACE_RUN.sub(" ", replaced).strip()


def _utf8_length(text: str) -> int:
    return len(text.encode("utf-8"))


def truncate_for_name(
    text: str | None,
    max_len: int = DEFAULT_MAX_TITLE_LENGTH,
    max_bytes: int = MAX_NAME_BYTES,
) -> str:
    """Sanitize text and bound it to ``max_len`` characters.

    Over-long names keep their first ``max_len - 1`` characters followed
    by a single ellipsis character. Names are also cut until their UTF-8
    form fits in ``max_bytes``.
    """
    if max_len < 1:
        return ""
    cleaned = sanitize(text)
    if len(cleaned) <= max_len and _utf8_length(cleaned) <= max_bytes:
        return cleaned

    end = min(len(cleaned), max_len - 1)
    while end > 0 and _utf8_length(cleaned[:end] + ELLIPSIS) > max_bytes:
        end -= 1
    return cleaned[:end] + ELLIPSIS
