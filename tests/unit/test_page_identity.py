# ABOUTME: Unit tests for PageIdentity construction and accessors.
# ABOUTME: Validates vector length and bounds checks and the property table.

import pytest

from leafery.series import BookSeries, PageConstructionError, PageIdentity


class TestConstruction:
    """Tests for PageIdentity validation."""

    def test_matching_length(self, comic: BookSeries) -> None:
        page = PageIdentity(series=comic, numbers=(12, 3, 1))
        assert page.numbers == (12, 3, 1)

    def test_short_vector_raises(self, comic: BookSeries) -> None:
        with pytest.raises(PageConstructionError, match="expects 3 number"):
            PageIdentity(series=comic, numbers=(12, 3))

    def test_long_vector_raises(self, journal: BookSeries) -> None:
        with pytest.raises(PageConstructionError, match="got 2"):
            PageIdentity(series=journal, numbers=(1, 2))

    def test_construction_error_is_value_error(self, journal: BookSeries) -> None:
        with pytest.raises(ValueError):
            PageIdentity(series=journal, numbers=())

    def test_unbound_entries_allowed(self, comic: BookSeries) -> None:
        page = PageIdentity(series=comic, numbers=(12, None, None))
        assert page.is_complete is False

    def test_out_of_bounds_raises(self, comic: BookSeries) -> None:
        """A number outside its axis bounds cannot be constructed."""
        with pytest.raises(PageConstructionError, match="panel 31 is outside 1..30"):
            PageIdentity(series=comic, numbers=(1, 1, 31))

    def test_list_input_becomes_tuple(self, journal: BookSeries) -> None:
        page = PageIdentity(series=journal, numbers=[7])  # type: ignore[arg-type]
        assert page.numbers == (7,)

    def test_unsupported_property_type_raises(self, journal: BookSeries) -> None:
        with pytest.raises(PageConstructionError, match="unsupported type list"):
            PageIdentity(series=journal, numbers=(7,), properties={"title": ["a"]})  # type: ignore[dict-item]


class TestAccessors:
    def test_of_takes_keyword_properties(self, journal: BookSeries) -> None:
        page = PageIdentity.of(journal, [7], title="draft", rev=2)
        assert page.properties == {"title": "draft", "rev": 2}

    def test_value_of(self, comic: BookSeries) -> None:
        page = PageIdentity.of(comic, [12, None, 4])
        assert page.value_of("issue") == 12
        assert page.value_of("page") is None
        assert page.value_of("panel") == 4

    def test_is_complete(self, journal: BookSeries) -> None:
        assert PageIdentity.of(journal, [7]).is_complete is True

    def test_properties_are_copied(self, journal: BookSeries) -> None:
        """Later changes to the caller's dict do not leak into the page."""
        props = {"title": "draft"}
        page = PageIdentity(series=journal, numbers=(7,), properties=props)
        props["title"] = "final"
        assert page.properties["title"] == "draft"

    def test_equal_pages_hash_alike(self, journal: BookSeries) -> None:
        first = PageIdentity.of(journal, [7], title="draft")
        second = PageIdentity.of(journal, [7], title="draft")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_properties_are_read_only(self, journal: BookSeries) -> None:
        page = PageIdentity.of(journal, [7], title="draft")
        with pytest.raises(TypeError):
            page.properties["title"] = "final"  # type: ignore[index]
