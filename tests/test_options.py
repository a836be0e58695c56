from types import MappingProxyType

import pytest

from masonry_quilt import LayoutOptions, OptionsError, calculate_layout


class TestLayoutOptions:
    def test_defaults(self):
        options = LayoutOptions()

        assert (options.base_size, options.gap, options.looseness) == (200, 16, 0.2)
        assert not options.include_grid
        assert not options.include_spaces

    @pytest.mark.parametrize("token, expected", [("s", 8), ("m", 16), ("l", 24)])
    def test_gap_tokens(self, token, expected):
        assert LayoutOptions(gap=token).gap == expected

    @pytest.mark.parametrize(
        "overrides",
        [
            {"base_size": 0},
            {"base_size": "200"},
            {"base_size": float("nan")},
            {"gap": -1},
            {"gap": "xl"},
            {"gap": True},
            {"looseness": 1.5},
            {"looseness": -0.1},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(OptionsError):
            LayoutOptions(**overrides)

    def test_options_error_is_value_error(self):
        with pytest.raises(ValueError):
            LayoutOptions(base_size=-5)

    def test_build_merges_overrides(self):
        options = LayoutOptions.build(LayoutOptions(gap="s"), looseness=0.5)

        assert options.gap == 8
        assert options.looseness == 0.5

    def test_build_camel_case(self):
        options = LayoutOptions.build({"baseSize": 100, "includeGrid": True, "includeSpaces": True})

        assert options.base_size == 100
        assert options.include_grid
        assert options.include_spaces

    def test_build_accepts_any_mapping(self):
        options = LayoutOptions.build(MappingProxyType({"gap": "l", "baseSize": 120}))

        assert (options.gap, options.base_size) == (24, 120)

    def test_build_unknown_option(self):
        with pytest.raises(OptionsError, match="spacing"):
            LayoutOptions.build({"spacing": 4})

    def test_build_rejects_other_types(self):
        with pytest.raises(OptionsError):
            LayoutOptions.build(5)

    def test_max_displacement(self):
        assert LayoutOptions().max_displacement(20) == 4
        assert LayoutOptions(looseness=0).max_displacement(20) == 0
        assert LayoutOptions(looseness=1).max_displacement(7) == 7


class TestCalculatorOptions:
    def test_invalid_options_raise(self):
        with pytest.raises(OptionsError):
            calculate_layout([{"id": 1}], 1000, 800, gap="huge")

    def test_invalid_options_raise_without_items(self):
        with pytest.raises(OptionsError):
            calculate_layout([], 1000, 800, looseness=2)
