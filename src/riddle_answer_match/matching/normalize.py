"""Text normalization for answer comparison."""

import re
import unicodedata

ARTICLES_RE = re.compile(r"\b(the|a|an)\b", re.IGNORECASE | re.ASCII)
COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
APOSTROPHES_RE = re.compile("['\u2019`]")
NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
NON_WORD_RE = re.compile(r"[^a-z0-9\s]", re.IGNORECASE)
WHITESPACE_RE = re.compile(r"\s+")
PLURAL_SUFFIX_RE = re.compile(r"(ses|xes|zes|ches|shes)$", re.IGNORECASE)
TRAILING_S_RE = re.compile(r"s$", re.IGNORECASE)


def strip_articles(text: str) -> str:
    """Replace the whole words "the", "a" and "an" with a space."""
    return ARTICLES_RE.sub(" ", text)


def fold_diacritics(text: str) -> str:
    """Decompose with NFKD and drop combining marks, so "é" becomes "e"."""
    return COMBINING_MARKS_RE.sub("", unicodedata.normalize("NFKD", text))


def standardize(text: str) -> str:
    """
    Compact form used for exact and edit-distance comparison.

    Articles, diacritics, apostrophes and every character outside ``[a-z0-9]``
    are removed, leaving a single lower-case token ("The Eiffel Tower!" ->
    "eiffeltower").

    Args:
        text: Raw answer text.

    Returns:
        Compact normalized string, empty if nothing alphanumeric remains.
    """
    folded = fold_diacritics(strip_articles(text))
    folded = APOSTROPHES_RE.sub("", folded).lower()
    return NON_ALNUM_RE.sub("", folded).strip()


def normalize_for_word_match(text: str) -> str:
    """
    Word-preserving form used for token overlap and number parsing.

    Args:
        text: Raw answer text.

    Returns:
        Lower-case words separated by single spaces ("An old, old man" ->
        "old old man"), empty if nothing alphanumeric remains.
    """
    folded = fold_diacritics(strip_articles(text))
    folded = NON_WORD_RE.sub(" ", folded).lower()
    return WHITESPACE_RE.sub(" ", folded).strip()


def singularize(value: str) -> str:
    """
    Plural-folding key for compact forms.

    A trailing ses/xes/zes/ches/shes is dropped entirely and otherwise one
    trailing "s" is removed: "needles" -> "needle", "buses" and "bus" -> "bu".
    The result is only meant to be compared with another folded value.
    """
    return TRAILING_S_RE.sub("", PLURAL_SUFFIX_RE.sub("s", value))
