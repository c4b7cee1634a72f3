"""
Classification helpers for Linked.Art relationship arrays.

Relationship arrays (identified_by, referred_to_by, classified_as, ...) hold
typed sub-objects, each optionally classified by vocabulary terms. These
helpers filter such arrays by classification id and language, and project
out the payload the caller is after (usually `content`).

All helpers treat missing or oddly-shaped data as "nothing found" and return
an empty list or None rather than raising.
"""

import logging
from typing import Any, Optional, Union

from linkedart.src.config import coerce_language_options
from linkedart.src.constants.aat import AAT, AAT_PREFIX
from linkedart.src.helpers.language_helpers import (
    LanguageOptionsLike,
    does_object_language_match,
)

logger = logging.getLogger(__name__)

CLASSIFIED_AS = "classified_as"
PART = "part"

RequestedClassifications = Union[str, list[str], tuple[str, ...], set[str]]
FieldPath = Union[str, int, list, tuple, None]


def normalize_to_list(item: Any) -> list:
    if item is None:
        return []
    if isinstance(item, list):
        return item
    return [item]


def normalize_field_to_array(obj: Any, field: str) -> list:
    """Return obj[field] as a list: missing -> [], single value -> [value]."""
    if not isinstance(obj, dict):
        return []
    return normalize_to_list(obj.get(field))


def normalize_aat_id(aat_id: Any, vocabulary: Optional[dict[str, str]] = None) -> Any:
    """
    Normalize a classification id (or list of ids) to its full vocabulary form.

    Handles:
    - symbolic names from the vocabulary map ("PRIMARY_NAME")
    - "aat:" shorthand ("aat:300404670")
    - https Getty vocabulary URLs (rewritten to the canonical http form)

    Anything else, including non-strings, is returned unchanged.
    """
    if isinstance(aat_id, (list, tuple)):
        return [normalize_aat_id(item, vocabulary) for item in aat_id]
    if not isinstance(aat_id, str):
        return aat_id

    vocabulary = AAT if vocabulary is None else vocabulary
    if aat_id in vocabulary:
        return vocabulary[aat_id]
    if aat_id.startswith("aat:"):
        return AAT_PREFIX + aat_id[len("aat:") :]
    if aat_id.startswith("https://vocab.getty.edu/"):
        return "http://" + aat_id[len("https://") :]
    return aat_id


def _classification_id(classification: Any) -> Optional[str]:
    if isinstance(classification, str):
        return classification
    if isinstance(classification, dict):
        classification_id = classification.get("id")
        if isinstance(classification_id, str):
            return classification_id
    return None


def _requested_ids(requested_classifications: Any) -> set[str]:
    if isinstance(requested_classifications, (set, frozenset, tuple)):
        requested_classifications = list(requested_classifications)
    requested = normalize_aat_id(normalize_to_list(requested_classifications))
    return {item for item in requested if isinstance(item, str)}


def get_classified_as(obj: Any) -> list[str]:
    """Normalized ids of the object's direct classifications, first-seen order."""
    ids = []
    for classification in normalize_field_to_array(obj, CLASSIFIED_AS):
        classification_id = _classification_id(classification)
        if classification_id:
            ids.append(normalize_aat_id(classification_id))
    return list(dict.fromkeys(ids))


def get_classified_as_transitive(obj: Any) -> list[str]:
    """
    Normalized ids of the classifications of the object's classifications.

    Only one level of indirection is followed: a classification of a
    classification of a classification is not considered.
    """
    ids = []
    for classification in normalize_field_to_array(obj, CLASSIFIED_AS):
        ids.extend(get_classified_as(classification))
    return list(dict.fromkeys(ids))


def _is_classified_as_any(obj: Any, requested: set[str]) -> bool:
    if requested.intersection(get_classified_as(obj)):
        return True
    return bool(requested.intersection(get_classified_as_transitive(obj)))


def does_object_match_classification(
    obj: Any, requested_classifications: RequestedClassifications
) -> bool:
    """True if any direct or one-level-transitive classification is requested."""
    requested = _requested_ids(requested_classifications)
    if not requested:
        return False
    return _is_classified_as_any(obj, requested)


def get_objects_by_classification(
    entries: Any,
    requested_classifications: RequestedClassifications,
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[dict]:
    """
    Filter a relationship array down to the entries classified as any of the
    requested ids that also match the requested language.

    Args:
        entries: A list of sub-objects (a single object or None are accepted)
        requested_classifications: One id or a list of ids (matches ANY of them)
        language: Limit to this language, or None for all languages
        language_options: See does_object_language_match

    Returns:
        The matching entries, in input order, duplicates kept
    """
    requested = _requested_ids(requested_classifications)
    if not requested:
        return []

    options = coerce_language_options(language_options)
    results = []
    for entry in normalize_to_list(entries):
        if not isinstance(entry, dict):
            continue
        if not _is_classified_as_any(entry, requested):
            continue
        if not does_object_language_match(entry, language, options):
            continue
        results.append(entry)
    return results


def get_field_value(obj: Any, path: FieldPath) -> Any:
    """
    Follow a key path into nested data.

    The path is a single key, a dotted string ("timespan.begin_of_the_begin"),
    a list of keys, or a bare int; integer keys (or digit strings) index into lists.
    Returns None as soon as a step is missing.
    """
    if path is None:
        return obj
    if isinstance(path, str):
        keys = path.split(".")
    elif isinstance(path, (list, tuple)):
        keys = list(path)
    else:
        keys = [path]

    current = obj
    for key in keys:
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(current, list) and str(key).isdigit():
            index = int(key)
            current = current[index] if index < len(current) else None
        else:
            return None
        if current is None:
            return None
    return current


def get_values_by_classification(
    entries: Any,
    requested_classifications: RequestedClassifications,
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
    field: FieldPath = "content",
) -> list:
    """
    Like get_objects_by_classification, but projects each match to `field`.

    Matches without the field are skipped. Pass field=None to get the whole
    matching objects back.
    """
    matches = get_objects_by_classification(
        entries, requested_classifications, language, language_options
    )
    if field is None:
        return matches

    values = []
    for match in matches:
        value = get_field_value(match, field)
        if value is not None:
            values.append(value)
    return values


def get_value_by_classification(
    entries: Any,
    requested_classifications: RequestedClassifications,
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
    field: FieldPath = "content",
) -> Any:
    """First value of get_values_by_classification, or None."""
    values = get_values_by_classification(
        entries, requested_classifications, language, language_options, field
    )
    return values[0] if values else None


def get_classified_as_with_classification(
    obj: Any, requested_classifications: RequestedClassifications
) -> list[dict]:
    """
    The object's classifications that are themselves classified as one of the
    requested ids, e.g. the "type of work" classifications of an artwork.
    """
    requested = _requested_ids(requested_classifications)
    results = []
    for classification in normalize_field_to_array(obj, CLASSIFIED_AS):
        if not isinstance(classification, dict):
            continue
        if requested.intersection(get_classified_as(classification)):
            results.append(classification)
    return results


def get_subfield_inside_part(obj: Any, field: str, subfield: str) -> list:
    """
    Collect `subfield` values from obj[field], whether they sit directly on it
    or inside its `part` list.

    Example:
        get_subfield_inside_part(
            {"produced_by": {"part": [{"carried_out_by": {"id": 123}}]}},
            "produced_by",
            "carried_out_by",
        ) -> [{"id": 123}]

    Direct hits come before hits found in parts. A list-valued obj[field] is
    walked one container at a time.
    """
    results: list = []
    containers = normalize_field_to_array(obj, field)
    if not containers:
        logger.debug(f"No '{field}' block to look for '{subfield}' in")
        return results

    for container in containers:
        if not isinstance(container, dict):
            continue
        results.extend(normalize_field_to_array(container, subfield))
        for part in normalize_field_to_array(container, PART):
            results.extend(normalize_field_to_array(part, subfield))
    return results
