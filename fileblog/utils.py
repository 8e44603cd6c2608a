import re
import unicodedata
from typing import Iterable, List, Optional, Union

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

# symbols that carry meaning in a title are spelled out rather than dropped
_SYMBOL_WORDS = {
    "&": "and",
    "|": "or",
    "<": "less",
    ">": "greater",
    "%": "percent",
    "$": "dollar",
}


def slugify(text: str) -> str:
    spelled = "".join(
        f" {_SYMBOL_WORDS[ch]} " if ch in _SYMBOL_WORDS else ch for ch in text
    )
    normalized = unicodedata.normalize("NFKD", spelled)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", ascii_text.lower()).strip("-")


def parse_tags(value: Optional[Union[str, Iterable[str]]]) -> List[str]:
    """Split a comma-separated string (or a list) into trimmed, non-empty tags."""
    if not value:
        return []
    raw = value.split(",") if isinstance(value, str) else value
    return [tag.strip() for tag in raw if tag and tag.strip()]
