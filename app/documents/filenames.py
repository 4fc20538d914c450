import re

_UNSAFE_RUNS = re.compile(r"[^\w.-]+", re.ASCII)
_MAX_STEM_LENGTH = 64


def safe_filename(title: str, extension: str) -> str:
    """Build an attachment filename from a user-supplied title.

    Runs of characters outside ``[A-Za-z0-9_.-]`` become ``_`` and the stem
    is cut to 64 characters before the extension is appended.
    """
    stem = _UNSAFE_RUNS.sub("_", title)[:_MAX_STEM_LENGTH]
    return f"{stem}{extension}"
