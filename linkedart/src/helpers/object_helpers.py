"""
Convenience getters for common fields of Linked.Art objects.

These are thin projections over the classification and language helpers.
When a getter is called without `language` and without `language_options`,
the defaults from the environment (see linkedart.src.config) are used.
"""

import logging
from typing import Any, Optional

from linkedart.src.config import get_config
from linkedart.src.constants.aat import AAT
from linkedart.src.helpers.basic_helpers import (
    get_classified_as_with_classification,
    get_subfield_inside_part,
    get_values_by_classification,
    normalize_aat_id,
    normalize_field_to_array,
)
from linkedart.src.helpers.language_helpers import LanguageOptionsLike

logger = logging.getLogger(__name__)

IDENTIFIED_BY = "identified_by"
REFERRED_TO_BY = "referred_to_by"
PRODUCED_BY = "produced_by"
CARRIED_OUT_BY = "carried_out_by"
TIMESPAN = "timespan"
TOOK_PLACE_AT = "took_place_at"
REPRESENTATION = "representation"
DIGITALLY_SHOWN_BY = "digitally_shown_by"
ACCESS_POINT = "access_point"


def _with_default_language(
    language: Optional[str], language_options: LanguageOptionsLike
) -> tuple[Optional[str], LanguageOptionsLike]:
    if language is None and language_options is None:
        config = get_config()
        return config.default_language, config.language_options()
    return language, language_options


def _values_by_classification(
    obj: Any,
    field: str,
    requested_classification: Any,
    language: Optional[str],
    language_options: LanguageOptionsLike,
) -> list:
    if not isinstance(obj, dict):
        return []
    language, language_options = _with_default_language(language, language_options)
    return get_values_by_classification(
        obj.get(field),
        normalize_aat_id(requested_classification),
        language,
        language_options,
    )


def get_primary_names(
    obj: Any,
    requested_classification: Any = AAT["PRIMARY_NAME"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    """Contents of the Names classified as preferred terms."""
    return _values_by_classification(
        obj, IDENTIFIED_BY, requested_classification, language, language_options
    )


def get_primary_name(
    obj: Any,
    requested_classification: Any = AAT["PRIMARY_NAME"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> Optional[str]:
    """
    The first primary name, falling back to the object's `_label`.

    Example:
        get_primary_name({"identified_by": [{
            "type": "Name",
            "content": "Young Woman Picking Fruit",
            "classified_as": [{"id": "http://vocab.getty.edu/aat/300404670"}],
        }]}) -> "Young Woman Picking Fruit"
    """
    names = get_primary_names(
        obj, requested_classification, language, language_options
    )
    if names:
        return names[0]
    if isinstance(obj, dict) and isinstance(obj.get("_label"), str):
        return obj["_label"]
    return None


def get_accession_numbers(
    obj: Any,
    requested_classification: Any = AAT["ACCESSION_NUMBER"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    return _values_by_classification(
        obj, IDENTIFIED_BY, requested_classification, language, language_options
    )


def get_accession_number(
    obj: Any,
    requested_classification: Any = AAT["ACCESSION_NUMBER"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> Optional[str]:
    numbers = get_accession_numbers(
        obj, requested_classification, language, language_options
    )
    return numbers[0] if numbers else None


def get_dimensions_descriptions(
    obj: Any,
    requested_classification: Any = AAT["DIMENSIONS_DESCRIPTION"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    """
    Contents of the dimensions statements in `referred_to_by`.

    Examples:
        get_dimensions_descriptions(obj)
        get_dimensions_descriptions(obj, language="cy")
        get_dimensions_descriptions(obj, requested_classification="aat:300266036")
    """
    return _values_by_classification(
        obj, REFERRED_TO_BY, requested_classification, language, language_options
    )


def get_material_statements(
    obj: Any,
    requested_classification: Any = AAT["MATERIALS_STATEMENT"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    return _values_by_classification(
        obj, REFERRED_TO_BY, requested_classification, language, language_options
    )


def get_descriptions(
    obj: Any,
    requested_classification: Any = AAT["DESCRIPTION"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    return _values_by_classification(
        obj, REFERRED_TO_BY, requested_classification, language, language_options
    )


def get_credit_line(
    obj: Any,
    requested_classification: Any = AAT["CREDIT_LINE"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> Optional[str]:
    credit_lines = _values_by_classification(
        obj, REFERRED_TO_BY, requested_classification, language, language_options
    )
    return credit_lines[0] if credit_lines else None


def get_copyright_licensing_statements(
    obj: Any,
    requested_classification: Any = AAT["COPYRIGHT_LICENSING_STATEMENT"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    return _values_by_classification(
        obj, REFERRED_TO_BY, requested_classification, language, language_options
    )


def get_provenance_statements(
    obj: Any,
    requested_classification: Any = AAT["PROVENANCE_STATEMENT"],
    language: Optional[str] = None,
    language_options: LanguageOptionsLike = None,
) -> list[str]:
    return _values_by_classification(
        obj, REFERRED_TO_BY, requested_classification, language, language_options
    )


def get_work_types(
    obj: Any, requested_classification: Any = AAT["TYPE_OF_WORK"]
) -> list[str]:
    """
    Labels of the object's classifications that are classified as "type of work".

    Classifications without a `_label` are reported by id.
    """
    work_types = []
    for classification in get_classified_as_with_classification(
        obj, requested_classification
    ):
        label = classification.get("_label") or classification.get("id")
        if label:
            work_types.append(label)
    return work_types


def get_carried_out_by(obj: Any) -> list:
    """
    The agents (usually references to a Person or Group) that carried out the
    production, whether the production is split into parts or not.

    Example:
        get_carried_out_by({"produced_by": {"part": [{"carried_out_by": {"id": 123}}]}})
        -> [{"id": 123}]
    """
    return get_subfield_inside_part(obj, PRODUCED_BY, CARRIED_OUT_BY)


def get_production_timespans(obj: Any) -> list:
    return get_subfield_inside_part(obj, PRODUCED_BY, TIMESPAN)


def get_production_places(obj: Any) -> list:
    return get_subfield_inside_part(obj, PRODUCED_BY, TOOK_PLACE_AT)


def get_digital_images(obj: Any) -> list[str]:
    """Access point URLs of the digital objects that show the object's representations."""
    urls = []
    for representation in normalize_field_to_array(obj, REPRESENTATION):
        for digital_object in normalize_field_to_array(representation, DIGITALLY_SHOWN_BY):
            for access_point in normalize_field_to_array(digital_object, ACCESS_POINT):
                if isinstance(access_point, str):
                    urls.append(access_point)
                elif isinstance(access_point, dict) and access_point.get("id"):
                    urls.append(access_point["id"])
    if not urls:
        logger.debug("No digital images found on object")
    return urls
