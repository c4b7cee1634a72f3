import json
import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

ENV_FILES = [".env.dev", ".env.prod", ".env"]


class LanguageOptions(BaseModel):
    """Options controlling how language declarations are matched.

    Accepts both snake_case field names and the camelCase keys used in
    Linked.Art tooling (lookupMap, fallbackLanguage, includeItemsWithNoLanguage).

    Attributes:
        lookup_map: Replaces DEFAULT_LANGUAGE_LOOKUP entirely (no merge)
        fallback_language: Secondary language accepted when the requested one is missing
        include_items_with_no_language: Only an explicit False excludes unlabelled
            items, so the value is kept as given ("false" and 0 still include)
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    lookup_map: Optional[dict[str, str]] = Field(default=None, alias="lookupMap")
    fallback_language: Optional[str] = Field(default=None, alias="fallbackLanguage")
    include_items_with_no_language: Any = Field(
        default=None, alias="includeItemsWithNoLanguage"
    )

    @field_validator("lookup_map", mode="before")
    @classmethod
    def drop_non_string_entries(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        kept = {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)}
        if len(kept) != len(value):
            logger.warning(
                f"Ignoring {len(value) - len(kept)} non-string lookupMap entries"
            )
        return kept


def coerce_language_options(language_options: Any) -> LanguageOptions:
    """Turn None, a mapping or a LanguageOptions instance into LanguageOptions.

    Each option is validated on its own: an invalid value falls back to that
    option's default with a warning, and the other options are kept.
    """
    if language_options is None:
        return LanguageOptions()
    if isinstance(language_options, LanguageOptions):
        return language_options
    if not isinstance(language_options, Mapping):
        logger.warning(
            f"Ignoring language options of type {type(language_options).__name__}, using defaults"
        )
        return LanguageOptions()

    values = {}
    for name, field in LanguageOptions.model_fields.items():
        for key in (field.alias, name):
            if key not in language_options:
                continue
            try:
                single = LanguageOptions.model_validate({name: language_options[key]})
            except ValidationError:
                logger.warning(f"Ignoring invalid language option '{key}', using its default")
            else:
                values[name] = getattr(single, name)
            break
    return LanguageOptions(**values)


class Config(BaseModel):
    default_language: Optional[str] = None
    fallback_language: Optional[str] = None
    include_items_with_no_language: bool = True
    language_lookup: Optional[dict[str, str]] = None

    def language_options(self) -> LanguageOptions:
        return LanguageOptions(
            lookup_map=self.language_lookup,
            fallback_language=self.fallback_language,
            include_items_with_no_language=self.include_items_with_no_language,
        )


def create_config() -> Config:
    for env_file in ENV_FILES:
        if Path(env_file).exists():
            dotenv.load_dotenv(env_file)
            logger.info(f"Loaded environment from {env_file}")
            break

    default_language = os.getenv("LINKEDART_DEFAULT_LANGUAGE") or None
    fallback_language = os.getenv("LINKEDART_FALLBACK_LANGUAGE") or None
    include_items_with_no_language = (
        os.getenv("LINKEDART_INCLUDE_ITEMS_WITH_NO_LANGUAGE", "True").lower()
        != "false"
    )
    raw_language_lookup = os.getenv("LINKEDART_LANGUAGE_LOOKUP")

    language_lookup = None
    if raw_language_lookup:
        try:
            language_lookup = json.loads(raw_language_lookup)
        except json.JSONDecodeError as e:
            raise ValueError(f"LINKEDART_LANGUAGE_LOOKUP is not valid JSON: {e}") from e
        if not isinstance(language_lookup, dict):
            raise ValueError("LINKEDART_LANGUAGE_LOOKUP must be a JSON object")

    return Config(
        default_language=default_language,
        fallback_language=fallback_language,
        include_items_with_no_language=include_items_with_no_language,
        language_lookup=language_lookup,
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Environment-driven defaults, created once per process."""
    return create_config()
