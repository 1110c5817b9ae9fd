import re
from typing import Optional

# First run of non-whitespace starting with a http(s) scheme; trailing punctuation is kept.
URL_PATTERN = re.compile(r"https?://\S+")


def extract_url(text: Optional[str]) -> Optional[str]:
    """Return the first http(s) URL found in free text, or None."""
    if not text:
        return None
    m = URL_PATTERN.search(text)
    return m.group(0) if m else None
