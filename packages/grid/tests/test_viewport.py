"""Tests for pi_grid.viewport"""
import dataclasses

import pytest

from pi_grid.viewport import DividerStrategy, Side, Viewport, parse_divider, resolve_divider


class TestViewport:
    def test_dimensions(self):
        vp = Viewport(30, 30, 100, 90)
        assert vp.width == 70
        assert vp.height == 60

    def test_empty_is_valid(self):
        vp = Viewport(5, 5, 5, 5)
        assert vp.width == 0 and vp.height == 0

    def test_start_after_end(self):
        with pytest.raises(ValueError):
            Viewport(10, 0, 5, 3)
        with pytest.raises(ValueError):
            Viewport(0, 4, 5, 3)

    def test_negative(self):
        with pytest.raises(ValueError):
            Viewport(-1, 0, 5, 3)

    def test_frozen(self):
        vp = Viewport(0, 0, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            vp.end_y = 4

    def test_value_equality(self):
        assert Viewport(0, 1, 2, 3) == Viewport(0, 1, 2, 3)
        assert hash(Viewport(0, 1, 2, 3)) == hash(Viewport(0, 1, 2, 3))


class TestDivider:
    @pytest.mark.parametrize("value,expected", [
        ("beginning", DividerStrategy.BEGINNING),
        ("END", DividerStrategy.END),
        (" halfway ", DividerStrategy.HALFWAY),
        ("7", 7),
        (3, 3),
        (DividerStrategy.END, DividerStrategy.END),
    ])
    def test_parse(self, value, expected):
        assert parse_divider(value) == expected

    @pytest.mark.parametrize("value", ["middle", "", True])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            parse_divider(value)

    def test_resolve(self):
        assert resolve_divider(DividerStrategy.BEGINNING, 9) == 0
        assert resolve_divider(DividerStrategy.END, 9) == 9
        assert resolve_divider(DividerStrategy.HALFWAY, 9) == 4
        assert resolve_divider(9, 9) == 9

    def test_resolve_out_of_range(self):
        with pytest.raises(ValueError):
            resolve_divider(10, 9)


class TestSide:
    def test_values(self):
        assert Side("minus") is Side.MINUS
        assert Side("plus") is Side.PLUS
