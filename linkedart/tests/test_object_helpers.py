"""
Unit tests for the convenience getters built on the classification helpers.
"""

import pytest

from linkedart.src.helpers.object_helpers import (
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


@pytest.mark.unit
class TestNames:
    def test_primary_names_all_languages(self, artwork):
        assert get_primary_names(artwork) == [
            "Young Woman Picking Fruit",
            "Jeune femme cueillant des fruits",
        ]

    def test_primary_name_in_language(self, artwork):
        assert get_primary_name(artwork, language="fr") == "Jeune femme cueillant des fruits"
        assert get_primary_name(artwork, language="en") == "Young Woman Picking Fruit"

    def test_primary_name_falls_back_to_label(self):
        assert get_primary_name({"_label": "Untitled"}) == "Untitled"
        assert get_primary_name({}) is None
        assert get_primary_name(None) is None

    def test_requested_classification_override(self, artwork):
        assert get_primary_names(artwork, requested_classification="aat:300312355") == ["1922.410"]


@pytest.mark.unit
class TestIdentifiers:
    def test_accession_number(self, artwork):
        assert get_accession_numbers(artwork) == ["1922.410"]
        assert get_accession_number(artwork) == "1922.410"

    def test_missing_accession_number(self):
        assert get_accession_numbers({"identified_by": []}) == []
        assert get_accession_number({}) is None


@pytest.mark.unit
class TestStatements:
    def test_dimensions_descriptions(self, artwork):
        assert get_dimensions_descriptions(artwork) == ["131.1 x 89.7 cm (51 5/8 x 35 5/16 in.)"]

    def test_dimensions_descriptions_excluding_unlabelled(self, artwork):
        assert get_dimensions_descriptions(
            artwork, language="en", language_options={"includeItemsWithNoLanguage": False}
        ) == []

    def test_material_statements(self, artwork):
        assert get_material_statements(artwork, language="en") == ["Oil on canvas"]
        assert get_material_statements(artwork, language="es") == []

    def test_credit_line(self, artwork):
        assert get_credit_line(artwork) == "Gift of Mrs. Potter Palmer"

    def test_statements_absent(self, artwork):
        assert get_descriptions(artwork) == []
        assert get_copyright_licensing_statements(artwork) == []
        assert get_provenance_statements(artwork) == []
        assert get_credit_line({}) is None


@pytest.mark.unit
class TestEnvironmentDefaults:
    def test_default_language_from_environment(self, artwork, monkeypatch):
        monkeypatch.setenv("LINKEDART_DEFAULT_LANGUAGE", "fr")
        assert get_primary_names(artwork) == ["Jeune femme cueillant des fruits"]

    def test_explicit_arguments_override_environment(self, artwork, monkeypatch):
        monkeypatch.setenv("LINKEDART_DEFAULT_LANGUAGE", "fr")
        assert get_primary_names(artwork, language="en") == ["Young Woman Picking Fruit"]

    def test_environment_excludes_unlabelled(self, artwork, monkeypatch):
        monkeypatch.setenv("LINKEDART_DEFAULT_LANGUAGE", "en")
        monkeypatch.setenv("LINKEDART_INCLUDE_ITEMS_WITH_NO_LANGUAGE", "false")
        assert get_dimensions_descriptions(artwork) == []
        assert get_material_statements(artwork) == ["Oil on canvas"]


@pytest.mark.unit
class TestProductionAndRepresentation:
    def test_carried_out_by(self, artwork):
        assert [agent["id"] for agent in get_carried_out_by(artwork)] == [
            "https://data.getty.edu/person/cassatt",
            "https://data.getty.edu/person/assistant",
        ]

    def test_carried_out_by_inside_part_only(self):
        obj = {"produced_by": {"part": [{"carried_out_by": {"id": 123}}]}}
        assert get_carried_out_by(obj) == [{"id": 123}]

    def test_carried_out_by_without_production(self):
        assert get_carried_out_by({}) == []

    def test_timespans_and_places(self, artwork):
        assert get_production_timespans(artwork) == [
            {"type": "TimeSpan", "begin_of_the_begin": "1892-01-01"}
        ]
        assert get_production_places(artwork) == [{"id": "https://data.getty.edu/place/paris"}]

    def test_work_types(self, artwork):
        assert get_work_types(artwork) == ["Paintings"]
        assert get_work_types({}) == []

    def test_digital_images(self, artwork):
        assert get_digital_images(artwork) == [
            "https://media.getty.edu/iiif/image/c88b3df0/full.jpg"
        ]
        assert get_digital_images({}) == []
