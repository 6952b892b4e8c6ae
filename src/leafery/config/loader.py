# ABOUTME: Loads config.yaml and builds the series registry, tag taxonomy, and genre table.
# ABOUTME: Validation failures surface as ConfigError naming the offending file.

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import ValidationError as PydanticValidationError

from leafery.config.schema import ConfigSchema, SeriesSchema, validate_config
from leafery.series.model import (
    AxisRef,
    BookSeries,
    Fragment,
    LiteralText,
    PropertyRef,
    Specificity,
    TagsRef,
    Timestamp,
)
from leafery.series.registry import SeriesRegistry
from leafery.tags.manifest import GenreConfig, GenreTable
from leafery.tags.taxonomy import TagRecord, TagTaxonomy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".leafery" / "config.yaml"
DEFAULT_ROOT = Path.home() / "Archive"
CONFIG_ENV_VAR = "LEAFERY_CONFIG"


class ConfigError(Exception):
    """Raised when the configuration file is missing, unreadable, or invalid."""

    def __init__(self, message: str, *, config_file: Path | None = None) -> None:
        super().__init__(message)
        self.config_file = config_file


@dataclass
class LeaferyConfig:
    """Fully built configuration: the tables every resolver is handed."""

    registry: SeriesRegistry
    taxonomy: TagTaxonomy
    genres: GenreTable
    root: Path
    timezone: tzinfo


def default_config_path() -> Path:
    """Config path from LEAFERY_CONFIG, else ~/.leafery/config.yaml."""
    env_value = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_value).expanduser() if env_value else DEFAULT_CONFIG_PATH


def _build_fragment(entry: Any) -> Fragment:
    if isinstance(entry, str):
        return LiteralText(entry)
    if entry.axis is not None:
        return AxisRef(entry.axis, pad=entry.pad, letters=entry.letters)
    if entry.property is not None:
        return PropertyRef(entry.property)
    if entry.timestamp is not None:
        return Timestamp(entry.timestamp)
    return TagsRef()


def _build_series(name: str, schema: SeriesSchema) -> BookSeries:
    return BookSeries(
        name=name,
        specificities=tuple(
            Specificity(spec.name, spec.minimum, spec.maximum)
            for spec in schema.specificities
        ),
        template=tuple(_build_fragment(entry) for entry in schema.template),
        folder=schema.folder,
    )


def build_config(schema: ConfigSchema, *, config_file: Path | None = None) -> LeaferyConfig:
    """Turn a validated schema into registry, taxonomy, and genre table.

    Raises:
        ConfigError: If a series template is inconsistent or the timezone is unknown.
    """
    taxonomy = TagTaxonomy(
        {
            tag: TagRecord(
                category=entry.category,
                plain=entry.plain,
                ascii=entry.ascii,
                social=entry.social,
            )
            for tag, entry in schema.tags.items()
        },
        special_category=schema.special_category,
        mixed_genre=schema.mixed_genre,
    )

    genres = GenreTable(
        {
            marker: GenreConfig(
                default_fragment=entry.default_fragment,
                metadata_head=entry.metadata_head,
                social_head=entry.social_head,
            )
            for marker, entry in schema.genres.items()
        }
    )
    for marker in genres.missing_markers(taxonomy):
        logger.warning("Genre '%s' has no manifestation settings in %s", marker, config_file)

    registry = SeriesRegistry()
    for name, series_schema in schema.series.items():
        try:
            registry.register(_build_series(name, series_schema))
        except ValueError as exc:
            raise ConfigError(f"Invalid series '{name}': {exc}", config_file=config_file) from exc

    try:
        timezone = ZoneInfo(schema.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(
            f"Unknown timezone '{schema.timezone}'", config_file=config_file
        ) from exc

    root = Path(schema.root).expanduser() if schema.root else DEFAULT_ROOT

    return LeaferyConfig(
        registry=registry,
        taxonomy=taxonomy,
        genres=genres,
        root=root,
        timezone=timezone,
    )


def load_config(path: Path | None = None) -> LeaferyConfig:
    """Load and validate the configuration file.

    Args:
        path: Path to config.yaml. Defaults to $LEAFERY_CONFIG or ~/.leafery/config.yaml.

    Returns:
        LeaferyConfig with all tables built.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or fails validation.
    """
    config_path = path or default_config_path()

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}", config_file=config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read {config_path}: {exc}", config_file=config_path) from exc

    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid {config_path}: top level must be a mapping", config_file=config_path
        )

    try:
        schema = validate_config(data)
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid {config_path}: {exc}", config_file=config_path) from exc

    config = build_config(schema, config_file=config_path)
    logger.debug(
        "Loaded %s: %d series, %d tags, %d genres",
        config_path,
        len(config.registry),
        len(config.taxonomy),
        len(config.genres),
    )
    return config
