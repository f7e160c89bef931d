"""String utilities for shapekit.

Key functions:
- trim / trimming_suffix_characters: Strip character sets
- removing_prefix / removing_suffix: Drop an affix when present
- count_occurrences / count_characters: Counting
- contains_any / contains_characters: Character membership
- indices_of / ranges_of: Non-overlapping substring search
- slash_escape: Backslash escaping
- filename_safe: Filename sanitizing
- path_extension: Extension of a path string
"""

from shapekit.text.strings import (
    FILENAME_MAX_LENGTH,
    contains_any,
    contains_characters,
    count_characters,
    count_occurrences,
    filename_safe,
    indices_of,
    path_extension,
    ranges_of,
    removing_prefix,
    removing_suffix,
    slash_escape,
    trim,
    trimming_suffix_characters,
)

__all__ = [
    "FILENAME_MAX_LENGTH",
    "contains_any",
    "contains_characters",
    "count_characters",
    "count_occurrences",
    "filename_safe",
    "indices_of",
    "path_extension",
    "ranges_of",
    "removing_prefix",
    "removing_suffix",
    "slash_escape",
    "trim",
    "trimming_suffix_characters",
]
