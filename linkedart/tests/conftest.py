"""
Pytest configuration and shared Linked.Art fixtures.
"""

import pytest

ENV_VARS = [
    "LINKEDART_DEFAULT_LANGUAGE",
    "LINKEDART_FALLBACK_LANGUAGE",
    "LINKEDART_INCLUDE_ITEMS_WITH_NO_LANGUAGE",
    "LINKEDART_LANGUAGE_LOOKUP",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep environment-driven config out of tests unless a test sets it."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear the cached config before and after each test."""
    from linkedart.src.config import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def artwork():
    """A small but realistic Linked.Art HumanMadeObject."""
    return {
        "@context": "https://linked.art/ns/v1/linked-art.json",
        "id": "https://data.getty.edu/museum/collection/object/c88b3df0",
        "type": "HumanMadeObject",
        "_label": "Young Woman Picking Fruit (label)",
        "classified_as": [
            {
                "id": "http://vocab.getty.edu/aat/300033618",
                "type": "Type",
                "_label": "Paintings",
                "classified_as": [
                    {
                        "id": "http://vocab.getty.edu/aat/300435443",
                        "type": "Type",
                        "_label": "Type of Work",
                    }
                ],
            },
            {"id": "http://vocab.getty.edu/aat/300133025", "_label": "works of art"},
        ],
        "identified_by": [
            {
                "type": "Name",
                "content": "Young Woman Picking Fruit",
                "language": [{"id": "http://vocab.getty.edu/aat/300388277"}],
                "classified_as": [
                    {
                        "id": "http://vocab.getty.edu/aat/300404670",
                        "type": "Type",
                        "_label": "preferred terms",
                    }
                ],
            },
            {
                "type": "Name",
                "content": "Jeune femme cueillant des fruits",
                "language": [{"id": "http://vocab.getty.edu/language/fr"}],
                "classified_as": [{"id": "aat:300404670"}],
            },
            {
                "type": "Identifier",
                "content": "1922.410",
                "classified_as": [
                    {
                        "id": "http://vocab.getty.edu/aat/300312355",
                        "_label": "accession number",
                    }
                ],
            },
        ],
        "referred_to_by": [
            {
                "type": "LinguisticObject",
                "content": "Oil on canvas",
                "language": "en",
                "classified_as": [{"id": "http://vocab.getty.edu/aat/300435429"}],
            },
            {
                "type": "LinguisticObject",
                "content": "131.1 x 89.7 cm (51 5/8 x 35 5/16 in.)",
                "classified_as": [{"id": "http://vocab.getty.edu/aat/300435430"}],
            },
            {
                "type": "LinguisticObject",
                "content": "Gift of Mrs. Potter Palmer",
                "language": [{"id": "http://vocab.getty.edu/aat/300388277"}],
                "classified_as": [{"id": "http://vocab.getty.edu/aat/300435418"}],
            },
        ],
        "produced_by": {
            "type": "Production",
            "carried_out_by": [
                {"id": "https://data.getty.edu/person/cassatt", "type": "Person"}
            ],
            "timespan": {"type": "TimeSpan", "begin_of_the_begin": "1892-01-01"},
            "part": [
                {
                    "type": "Production",
                    "carried_out_by": [
                        {"id": "https://data.getty.edu/person/assistant", "type": "Person"}
                    ],
                    "took_place_at": [{"id": "https://data.getty.edu/place/paris"}],
                }
            ],
        },
        "representation": [
            {
                "type": "VisualItem",
                "digitally_shown_by": [
                    {
                        "type": "DigitalObject",
                        "access_point": [
                            {"id": "https://media.getty.edu/iiif/image/c88b3df0/full.jpg"}
                        ],
                    }
                ],
            }
        ],
    }
