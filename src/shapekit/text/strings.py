"""String helpers.

Pure string-to-string and string-to-scalar transforms: trimming, counting,
searching, escaping and filename sanitizing. Offsets are indices into the
Python string (code points).
"""

import unicodedata
from collections.abc import Iterable
from pathlib import PurePosixPath

# Longest filename accepted by common filesystems
FILENAME_MAX_LENGTH = 255


def path_extension(s: str) -> str:
    """Return the extension of the last path component, without the dot.

    Examples:
        >>> path_extension("docs/report.final.pdf")
        'pdf'
        >>> path_extension("Makefile")
        ''
    """
    return PurePosixPath(s).suffix.removeprefix(".")


def trim(s: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``s``."""
    return s.strip(chars)


def trimming_suffix_characters(s: str, chars: Iterable[str]) -> str:
    """Remove every trailing character of ``s`` that is in ``chars``."""
    return s.rstrip("".join(chars))


def count_occurrences(s: str, target: str) -> int:
    """Count non-overlapping occurrences of ``target`` in ``s``.

    An empty target never matches.

    Examples:
        >>> count_occurrences("aaaa", "aa")
        2
    """
    if not target:
        return 0
    return s.count(target)


def count_characters(s: str, chars: Iterable[str]) -> int:
    """Count the characters of ``s`` that belong to ``chars``."""
    charset = set(chars)
    return sum(1 for c in s if c in charset)


def contains_any(s: str, *chars: str) -> bool:
    """Check whether ``s`` contains any of the given characters."""
    return any(c in s for c in chars)


def contains_characters(s: str, chars: str) -> bool:
    """Check whether ``s`` contains any character of the string ``chars``."""
    return contains_any(s, *chars)


def slash_escape(s: str, chars: Iterable[str]) -> str:
    """Escape ``chars`` in ``s`` with a backslash.

    Existing backslashes are doubled first, so the result can be unescaped
    unambiguously.

    Examples:
        >>> slash_escape('say "hi"', '"')
        'say \\\\"hi\\\\"'
    """
    charset = set(chars)
    parts = []
    for c in s:
        if c == "\\":
            parts.append("\\\\")
        elif c in charset:
            parts.append("\\" + c)
        else:
            parts.append(c)
    return "".join(parts)


def indices_of(s: str, occurrence: str) -> list[int]:
    """Return the start offsets of non-overlapping occurrences.

    The search resumes after the end of each match. An empty occurrence
    yields no offsets.

    Examples:
        >>> indices_of("abcabcab", "ab")
        [0, 3, 6]
        >>> indices_of("aaa", "aa")
        [0]
    """
    if not occurrence:
        return []

    indices = []
    position = s.find(occurrence)
    while position != -1:
        indices.append(position)
        position = s.find(occurrence, position + len(occurrence))
    return indices


def ranges_of(s: str, occurrence: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` offsets of non-overlapping occurrences.

    Each pair slices the match out of ``s``: ``s[start:end] == occurrence``.
    """
    return [(i, i + len(occurrence)) for i in indices_of(s, occurrence)]


def _is_filename_char(c: str) -> bool:
    return c.isspace() or unicodedata.category(c)[0] in "LMN"


def filename_safe(s: str, max_length: int = FILENAME_MAX_LENGTH) -> str:
    """Make ``s`` usable as a filename.

    Removes everything except letters, combining marks, digits and
    whitespace, trims the ends, replaces each run of whitespace with a
    single ``-`` and truncates to ``max_length`` code points. Combining marks
    are kept so decomposed (NFD) text keeps its accents. Truncation never
    separates a base character from its combining marks: a character
    split at the limit is dropped whole, so the result may be shorter
    than ``max_length``.

    Examples:
        >>> filename_safe("  My Report: Q3/2024 (final)  ")
        'My-Report-Q32024-final'
    """
    filtered = "".join(c for c in s if _is_filename_char(c))
    normalized = "-".join(filtered.split())

    cut = max_length
    while 0 < cut < len(normalized) and unicodedata.category(normalized[cut]).startswith("M"):
        cut -= 1
    return normalized[:cut]


def removing_prefix(s: str, prefix: str) -> str:
    """Return ``s`` without ``prefix``, or ``s`` itself if it lacks it."""
    return s.removeprefix(prefix)


def removing_suffix(s: str, suffix: str) -> str:
    """Return ``s`` without ``suffix``, or ``s`` itself if it lacks it."""
    return s.removesuffix(suffix)
