"""Tests for domain/model/filter_config.py."""

import pytest

from params_filter.domain.model.filter_config import WILDCARD, FilterConfig, coerce_names


class TestCoerceNames:
    """Tests for coerce_names()."""

    def test_none_is_empty(self) -> None:
        """None yields no names."""
        assert coerce_names(None) == ()

    def test_string_is_single_name(self) -> None:
        """Bare string is one name, not its characters."""
        assert coerce_names("name") == ("name",)

    def test_list_to_tuple(self) -> None:
        """List converted to tuple in order."""
        assert coerce_names(["a", "b"]) == ("a", "b")

    def test_drops_none_entries(self) -> None:
        """None entries are removed."""
        assert coerce_names(["a", None, "b", None]) == ("a", "b")

    def test_drops_unhashable_entries(self) -> None:
        """Entries that cannot be record keys are removed."""
        assert coerce_names(["a", ["b"], {"c"}, "d"]) == ("a", "d")

    def test_keeps_duplicates_and_order(self) -> None:
        """Duplicates kept, order preserved."""
        assert coerce_names(["b", "a", "b"]) == ("b", "a", "b")

    def test_generator_consumed(self) -> None:
        """Any iterable is accepted."""
        assert coerce_names(n for n in ("x", "y")) == ("x", "y")

    def test_set_accepted(self) -> None:
        """Set of names becomes tuple of names."""
        assert coerce_names({"a"}) == ("a",)

    def test_non_iterable_is_empty(self) -> None:
        """Non-iterable value yields no names."""
        assert coerce_names(42) == ()


class TestFilterConfigValidation:
    """FAIL-FIRST validation in __post_init__."""

    def test_defaults_empty(self) -> None:
        """Default config has no rules and debug off."""
        config = FilterConfig()
        assert config.required == ()
        assert config.accepted == ()
        assert config.excluded == ()
        assert config.debug is False

    @pytest.mark.parametrize("field", ["required", "accepted", "excluded"])
    def test_list_rejected(self, field: str) -> None:
        """Name lists must be tuples."""
        with pytest.raises(TypeError, match=field):
            FilterConfig(**{field: ["a"]})

    def test_non_bool_debug_rejected(self) -> None:
        """Debug must be a real bool."""
        with pytest.raises(TypeError, match="debug"):
            FilterConfig(debug=1)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Config cannot be modified after creation."""
        config = FilterConfig()
        with pytest.raises(AttributeError):
            config.required = ("a",)  # type: ignore[misc]


class TestFilterConfigCreate:
    """Tests for FilterConfig.create()."""

    def test_coerces_all_lists(self) -> None:
        """Loose arguments coerced to tuples and bool."""
        config = FilterConfig.create(["a"], ["b", None], "c", debug=1)
        assert config.required == ("a",)
        assert config.accepted == ("b",)
        assert config.excluded == ("c",)
        assert config.debug is True

    def test_none_lists_are_empty(self) -> None:
        """No arguments gives the empty config."""
        assert FilterConfig.create() == FilterConfig.empty()


class TestFilterConfigFromMapping:
    """Tests for FilterConfig.from_mapping() leniency."""

    @pytest.mark.parametrize("value", [None, "required", ["required"], 3])
    def test_non_mapping_is_empty(self, value: object) -> None:
        """Anything but a mapping gives the empty config."""
        assert FilterConfig.from_mapping(value) == FilterConfig.empty()

    def test_reads_all_keys(self) -> None:
        """All rule keys and debug are read."""
        config = FilterConfig.from_mapping(
            {"required": ["id"], "accepted": ["*"], "excluded": ["pw"], "debug": True}
        )
        assert config == FilterConfig(("id",), ("*",), ("pw",), True)

    def test_uppercase_debug_key(self) -> None:
        """DEBUG key enables debug too."""
        assert FilterConfig.from_mapping({"DEBUG": 1}).debug is True

    def test_missing_keys_default_empty(self) -> None:
        """Absent keys default to empty lists and debug off."""
        config = FilterConfig.from_mapping({"accepted": ["a"]})
        assert config.required == ()
        assert config.excluded == ()
        assert config.debug is False

    def test_malformed_list_is_empty(self) -> None:
        """Non-iterable list value becomes empty."""
        assert FilterConfig.from_mapping({"required": 5}).required == ()


class TestFilterConfigQueries:
    """Tests for derived properties and with_* copies."""

    def test_has_wildcard(self) -> None:
        """WILDCARD in accepted is detected."""
        assert FilterConfig(accepted=("a", WILDCARD)).has_wildcard is True
        assert FilterConfig(accepted=("a",)).has_wildcard is False

    def test_wildcard_in_required_is_not_wildcard(self) -> None:
        """WILDCARD outside accepted is a literal name."""
        assert FilterConfig(required=(WILDCARD,)).has_wildcard is False

    def test_unique_required(self) -> None:
        """Duplicate required names collapsed, first wins."""
        config = FilterConfig(required=("b", "a", "b"))
        assert config.unique_required == ("b", "a")

    def test_with_methods_return_new_config(self) -> None:
        """with_* leave the original untouched."""
        original = FilterConfig(debug=True)
        changed = original.with_required(["a"]).with_accepted("b").with_excluded(["c"])

        assert original == FilterConfig(debug=True)
        assert changed == FilterConfig(("a",), ("b",), ("c",), True)
