"""Tests for the portion multiplier and scaled ingredient rows."""

import math

from models import Ingredient
from services.scaling import (
    compute_multiplier,
    is_valid_multiplier,
    is_displayable_amount,
    scale_ingredient,
    build_scaling_view,
)


def _ingredient(amount, unit='tsp', ingredient_id='a'):
    return Ingredient(id=ingredient_id, name='salt', amount=amount, unit=unit)


def test_multiplier_is_desired_over_original():
    assert compute_multiplier('1', '2') == 2
    assert compute_multiplier('4', '1') == 0.25
    assert compute_multiplier('1 1/2', '3') == 2


def test_multiplier_with_zero_original_is_not_finite():
    assert compute_multiplier('0', '2') == math.inf
    assert compute_multiplier('abc', '2') == math.inf
    assert math.isnan(compute_multiplier('0', '0'))
    assert compute_multiplier('0', '-2') == -math.inf


def test_is_valid_multiplier():
    assert is_valid_multiplier(2.0)
    assert not is_valid_multiplier(0.0)
    assert not is_valid_multiplier(-1.0)
    assert not is_valid_multiplier(math.inf)
    assert not is_valid_multiplier(math.nan)


def test_is_displayable_amount():
    assert is_displayable_amount(0.5, 1.0)
    assert is_displayable_amount(0.5, 0.0)
    assert not is_displayable_amount(0.0, 0.0)
    assert not is_displayable_amount(-1.0, -2.0)
    assert not is_displayable_amount(0.5, math.inf)
    assert not is_displayable_amount(0.5, math.nan)


def test_half_teaspoon_doubled():
    row = scale_ingredient(_ingredient('1/2'), compute_multiplier('1', '2'))
    assert row.original_amount == 0.5
    assert row.scaled_amount == 1
    assert row.scaled_display == '1'
    assert row.displayable


def test_empty_amount_is_not_displayable():
    row = scale_ingredient(_ingredient(''), 2.0)
    assert row.original_amount == 0
    assert row.scaled_display is None
    assert not row.displayable


def test_view_with_zero_original_hides_every_row():
    view = build_scaling_view('0', '2', [_ingredient('1', ingredient_id='a'),
                                         _ingredient('1/2', ingredient_id='b')])
    assert not view.multiplier_valid
    assert view.multiplier_display is None
    assert all(not row.displayable for row in view.rows)


def test_view_with_negative_multiplier_hides_rows():
    view = build_scaling_view('1', '-2', [_ingredient('1')])
    assert not view.multiplier_valid
    assert not view.rows[0].displayable


def test_view_formats_multiplier():
    view = build_scaling_view('2', '1', [_ingredient('3')])
    assert view.multiplier == 0.5
    assert view.multiplier_display == '1/2'
    assert view.rows[0].scaled_display == '1 1/2'


def test_view_keeps_row_order():
    ingredients = [_ingredient('1', ingredient_id=str(i)) for i in range(3)]
    view = build_scaling_view('1', '3', ingredients)
    assert [row.ingredient.id for row in view.rows] == ['0', '1', '2']
    assert [row.scaled_display for row in view.rows] == ['3', '3', '3']
