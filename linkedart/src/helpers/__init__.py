"""Linked.Art language, classification and object helpers."""

from .language_helpers import (
    does_object_language_match,
    get_language_ids,
    normalize_language_id,
)
from .basic_helpers import (
    does_object_match_classification,
    get_classified_as,
    get_classified_as_transitive,
    get_classified_as_with_classification,
    get_field_value,
    get_objects_by_classification,
    get_subfield_inside_part,
    get_value_by_classification,
    get_values_by_classification,
    normalize_aat_id,
    normalize_field_to_array,
)
from .object_helpers import (
    get_accession_number,
    get_accession_numbers,
    get_carried_out_by,
    get_copyright_licensing_statements,
    get_credit_line,
    get_descriptions,
    get_digital_images,
    get_dimensions_descriptions,
    get_material_statements,
    get_primary_name,
    get_primary_names,
    get_production_places,
    get_production_timespans,
    get_provenance_statements,
    get_work_types,
)

__all__ = [
    "does_object_language_match",
    "get_language_ids",
    "normalize_language_id",
    "does_object_match_classification",
    "get_classified_as",
    "get_classified_as_transitive",
    "get_classified_as_with_classification",
    "get_field_value",
    "get_objects_by_classification",
    "get_subfield_inside_part",
    "get_value_by_classification",
    "get_values_by_classification",
    "normalize_aat_id",
    "normalize_field_to_array",
    "get_accession_number",
    "get_accession_numbers",
    "get_carried_out_by",
    "get_copyright_licensing_statements",
    "get_credit_line",
    "get_descriptions",
    "get_digital_images",
    "get_dimensions_descriptions",
    "get_material_statements",
    "get_primary_name",
    "get_primary_names",
    "get_production_places",
    "get_production_timespans",
    "get_provenance_statements",
    "get_work_types",
]
