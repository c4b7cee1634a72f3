"""
Helpers for working with language declarations in Linked.Art documents.

A fragment's `language` can be missing, a single id string, an object with an
`id`, or a list mixing those (None entries mark explicitly unlabelled items).
Everything is collapsed to a list of canonical ids before any comparison.
"""

import logging
import re
from typing import Any, Optional, Union

from linkedart.src.config import LanguageOptions, coerce_language_options
from linkedart.src.constants.languages import DEFAULT_LANGUAGE_LOOKUP, NO_LANGUAGE

logger = logging.getLogger(__name__)

# Vocabulary URLs whose last path segment is the short code, e.g. .../language/en
TRAILING_CODE_PATTERN = re.compile(r"/([a-zA-Z]+)\Z")

LanguageOptionsLike = Union[LanguageOptions, dict, None]


def normalize_language_id(
    lang_id: Optional[str], language_options: LanguageOptionsLike = None
) -> str:
    """Normalize a language id to its canonical form (by default an AAT id).

    Examples:
        normalize_language_id("en") -> "http://vocab.getty.edu/aat/300388277"
        normalize_language_id("http://vocab.getty.edu/language/en") -> same as above
        normalize_language_id("el") -> "el"
        normalize_language_id("en", {"lookupMap": {"el": "greek"}}) -> "en"

    Args:
        lang_id: Raw language id, or None
        language_options: May carry a lookup_map replacing the default table

    Returns:
        The mapped canonical id, NO_LANGUAGE for None, otherwise the input unchanged
    """
    if lang_id is None:
        return NO_LANGUAGE

    options = coerce_language_options(language_options)
    lookup_map = (
        options.lookup_map if options.lookup_map is not None else DEFAULT_LANGUAGE_LOOKUP
    )

    lang = str(lang_id).lower()
    match = TRAILING_CODE_PATTERN.search(lang)
    if match:
        lang = match.group(1)

    lookup = lookup_map.get(lang)
    if lookup is not None:
        return lookup

    return lang_id


def _raw_language_values(language: Any) -> list[str]:
    """Flatten a multi-valued `language` field to raw id strings."""
    if isinstance(language, dict):
        language = [language]
    if not isinstance(language, (list, tuple)):
        return []

    raw_ids = []
    for entry in language:
        if entry is None:
            raw_ids.append(NO_LANGUAGE)
        elif isinstance(entry, str):
            raw_ids.append(entry)
        elif isinstance(entry, dict) and entry.get("id"):
            raw_ids.append(entry["id"])
    return raw_ids


def get_language_ids(obj: Any, language_options: LanguageOptionsLike = None) -> list[str]:
    """Get the unique, normalized language ids declared on an object.

    Args:
        obj: The fragment to look for a `language` block in
        language_options: Passed through to normalize_language_id

    Returns:
        Canonical ids in first-seen order; [NO_LANGUAGE] if nothing is declared
    """
    if not isinstance(obj, dict) or obj.get("language") is None:
        return [NO_LANGUAGE]

    options = coerce_language_options(language_options)
    language = obj["language"]
    if isinstance(language, str):
        return [normalize_language_id(language, options)]

    unique_raw_ids = dict.fromkeys(_raw_language_values(language))
    normalized = [normalize_language_id(lang_id, options) for lang_id in unique_raw_ids]
    # Two raw ids can normalize to the same canonical id
    return list(dict.fromkeys(normalized))


def does_object_language_match(
    obj: Any, language: Optional[str], language_options: LanguageOptionsLike = None
) -> bool:
    """Check whether an object matches the requested language.

    True when, checked in this order:
    1. language is None (unconstrained)
    2. the object declares the requested language
    3. the object declares language_options.fallback_language
    4. the object declares no language, unless include_items_with_no_language is False

    Examples:
        does_object_language_match({"content": "test"}, "en") -> True
        does_object_language_match({"content": "test"}, "en",
            {"includeItemsWithNoLanguage": False}) -> False
        does_object_language_match({"language": "fr"}, "en",
            {"fallbackLanguage": "fr"}) -> True
    """
    if language is None:
        return True

    options = coerce_language_options(language_options)
    lang_ids = get_language_ids(obj, options)

    if normalize_language_id(language, options) in lang_ids:
        return True

    if options.fallback_language is not None and (
        normalize_language_id(options.fallback_language, options) in lang_ids
    ):
        return True

    if NO_LANGUAGE in lang_ids or not lang_ids:
        return options.include_items_with_no_language is not False

    logger.debug(f"Language mismatch: wanted {language}, object declares {lang_ids}")
    return False
