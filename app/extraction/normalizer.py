import re

_SPACE_RUNS = re.compile(r"[ \u00a0]+")


def normalize_text(text: str) -> str:
    """Drop carriage returns, turn tabs into spaces, collapse space runs and trim.

    Newlines are kept so paragraph structure survives. Applying it twice
    gives the same result as applying it once.
    """
    text = text.replace("\r", "")
    text = text.replace("\t", " ")
    text = _SPACE_RUNS.sub(" ", text)
    return text.strip()
