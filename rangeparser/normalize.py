"""Text normalization for deterministic range phrase parsing."""

from __future__ import annotations

import re

from rangeparser.dictionaries import replace_ordinals

_MULTISPACE_RE = re.compile(r"\s+")
_COUNTED_UNIT_RE = re.compile(r"\d+ (?:quarter|day|week|month|year)")
_AGO_SUFFIX_RE = re.compile(r" ago$")
_HENCE_SUFFIX_RE = re.compile(r" (?:hence|from\s+now)$")
_THE_RE = re.compile(r"\bthe\b")
_RELATIVE_PREFIX_RE = re.compile(r"^(?:past|next) ")


def _squeeze(value: str) -> str:
    return _MULTISPACE_RE.sub(" ", value).strip()


def _rewrite_relative_suffix(value: str) -> str:
    """Turn "tuesday ago" into "past tuesday" and "tuesday hence" into "next tuesday".

    Counted units ("3 days ago", "2 months from now") keep their suffix: they have dedicated rules.
    A phrase already starting with "past"/"next" is left alone, so the rewrite applies only once.
    """

    if _COUNTED_UNIT_RE.search(value) or _RELATIVE_PREFIX_RE.match(value):
        return value

    rewritten, count = _AGO_SUFFIX_RE.subn("", value)
    if count:
        return f"past {rewritten}"

    rewritten, count = _HENCE_SUFFIX_RE.subn("", value)
    if count:
        return f"next {rewritten}"

    return value


def normalize_phrase(text: str) -> str:
    """Normalize a user phrase for rules-based range parsing.

    Steps, in order:
        - Lowercase, trim and collapse whitespace.
        - Rewrite a trailing "ago" / "hence" / "from now" into a leading "past" / "next".
        - Replace spelled-out ordinals with numerals ("twenty-first" -> "21st").
        - Drop the word "the".
        - Trim and collapse whitespace again.

    Spelled-out counts ("two weeks ago") are left alone and will not match any count rule.
    """

    value = _squeeze((text or "").lower())
    value = _rewrite_relative_suffix(value)
    value = replace_ordinals(value)
    value = _THE_RE.sub("", value)
    return _squeeze(value)
