# ABOUTME: Shared pytest fixtures for leafery tests.
# ABOUTME: Provides sample series, a tag taxonomy, genre settings, and a config file.

from pathlib import Path

import pytest

from leafery.series.model import (
    AxisRef,
    BookSeries,
    LiteralText,
    PropertyRef,
    Specificity,
    TagsRef,
)
from leafery.series.registry import SeriesRegistry
from leafery.tags.manifest import GenreConfig, GenreTable
from leafery.tags.taxonomy import TagRecord, TagTaxonomy

SAMPLE_CONFIG = """\
root: {root}
timezone: Europe/Berlin
tags:
  oak: {{category: tree, plain: Oak, social: oaktree}}
  ash: {{category: tree, plain: Ash}}
  fox: {{category: animal, plain: Fox, social: foxes}}
  café: {{category: place, plain: Café, ascii: Cafe, social: cafe}}
  wip: {{category: special, plain: WIP}}
genres:
  tree: {{metadata_head: Flora, social_head: flora, default_fragment: mixed-flora}}
  animal: {{metadata_head: Fauna, social_head: fauna, default_fragment: fauna}}
  place: {{metadata_head: Places, default_fragment: places}}
  mixed: {{metadata_head: Misc, default_fragment: misc}}
series:
  journal:
    folder: Journal
    specificities:
      - {{name: page, min: 1, max: 999}}
    template: ["J", {{axis: page, pad: 3}}, ".", {{property: title}}]
  comic:
    folder: Comics
    specificities:
      - {{name: issue, min: 1, max: 500}}
      - {{name: page, min: 1, max: 99}}
      - {{name: panel, min: 1, max: 30}}
    template:
      - "C"
      - {{axis: issue, pad: 3}}
      - "-"
      - {{axis: page, pad: 2}}
      - {{axis: panel, letters: true}}
      - "_"
      - {{tags: true}}
"""


@pytest.fixture
def journal() -> BookSeries:
    """Single-axis series named like J007.draft."""
    return BookSeries(
        name="journal",
        specificities=(Specificity("page", 1, 999),),
        template=(
            LiteralText("J"),
            AxisRef("page", pad=3),
            LiteralText("."),
            PropertyRef("title"),
        ),
        folder="Journal",
    )


@pytest.fixture
def comic() -> BookSeries:
    """Three-axis series whose names end in the tag fragment."""
    return BookSeries(
        name="comic",
        specificities=(
            Specificity("issue", 1, 500),
            Specificity("page", 1, 99),
            Specificity("panel", 1, 30),
        ),
        template=(
            LiteralText("C"),
            AxisRef("issue", pad=3),
            LiteralText("-"),
            AxisRef("page", pad=2),
            AxisRef("panel", letters=True),
            LiteralText("_"),
            TagsRef(),
        ),
        folder="Comics",
    )


@pytest.fixture
def registry(journal: BookSeries, comic: BookSeries) -> SeriesRegistry:
    return SeriesRegistry([journal, comic])


@pytest.fixture
def taxonomy() -> TagTaxonomy:
    """Tags across three categories plus one special tag."""
    return TagTaxonomy(
        {
            "oak": TagRecord(category="tree", plain="Oak", social="oaktree"),
            "ash": TagRecord(category="tree", plain="Ash"),
            "fox": TagRecord(category="animal", plain="Fox", social="foxes"),
            "café": TagRecord(category="place", plain="Café", ascii="Cafe", social="cafe"),
            "wip": TagRecord(category="special", plain="WIP"),
        }
    )


@pytest.fixture
def genres() -> GenreTable:
    return GenreTable(
        {
            "tree": GenreConfig(
                metadata_head="Flora", social_head="flora", default_fragment="mixed-flora"
            ),
            "animal": GenreConfig(
                metadata_head="Fauna", social_head="fauna", default_fragment="fauna"
            ),
            "place": GenreConfig(metadata_head="Places", default_fragment="places"),
            "mixed": GenreConfig(metadata_head="Misc", default_fragment="misc"),
        }
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A config.yaml matching the fixtures above, rooted in tmp_path/archive."""
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE_CONFIG.format(root=tmp_path / "archive"), encoding="utf-8")
    return path


@pytest.fixture
def scan(tmp_path: Path) -> Path:
    """A scanned page waiting to be archived."""
    path = tmp_path / "inbox" / "scan0001.jpg"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"fake jpg")
    return path
