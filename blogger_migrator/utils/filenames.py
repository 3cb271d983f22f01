from __future__ import annotations

import re

# Characters rejected by common filesystems (Windows being the strictest).
_ILLEGAL_RE = re.compile(r'[/?<>\\:*|"]')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED_RE = re.compile(r"^\.+$")
_WINDOWS_RESERVED_RE = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING_RE = re.compile(r"[. ]+$")

_INVALID_RUN_RE = re.compile(r'[<>:"/\\|?*]+')
_HYPHEN_RUN_RE = re.compile(r"-{2,}")

MAX_FILENAME_BYTES = 255


def _truncate_utf8(text: str, limit: int) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= limit:
        return text
    # Drop a partial multi-byte sequence at the cut
    return encoded[:limit].decode("utf-8", errors="ignore")


def _strip_unsafe(text: str) -> str:
    """Remove characters and names that are never valid as a filename."""
    text = _ILLEGAL_RE.sub("", text)
    text = _CONTROL_RE.sub("", text)
    text = _RESERVED_RE.sub("", text)
    text = _WINDOWS_RESERVED_RE.sub("", text)
    text = _WINDOWS_TRAILING_RE.sub("", text)
    return _truncate_utf8(text, MAX_FILENAME_BYTES)


def sanitize_filename(text: str) -> str:
    """
    Turn an arbitrary post title into a safe, lowercase base filename.

    - Removes characters illegal on common filesystems, control
      characters and reserved device names
    - Replaces anything still matching ``<>:"/\\|?*`` with a hyphen
    - Collapses runs of two or more hyphens into one
    - Trims surrounding whitespace and lowercases

    The result may be empty or a lone hyphen; callers check it with
    :func:`is_usable_filename`.
    """
    if not text:
        return ""
    name = _strip_unsafe(text)
    name = _INVALID_RUN_RE.sub("-", name)
    name = _HYPHEN_RUN_RE.sub("-", name)
    return name.strip().lower()


def is_usable_filename(name: str) -> bool:
    return bool(name) and name != "-"
