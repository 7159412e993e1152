"""Tests for adjustment vector clamping and defaults."""

import pytest
from models.adjustments import ADJUSTMENT_SPECS, AdjustmentVector


def test_defaults_are_neutral():
    """A fresh vector is {100, 100, 100, 0, 0}."""
    adj = AdjustmentVector()
    assert adj.as_dict() == {
        'brightness': 100, 'contrast': 100, 'saturation': 100,
        'highlights': 0, 'shadows': 0,
    }
    assert adj.is_neutral()


def test_brightness_clamped_to_max():
    adj = AdjustmentVector().with_value('brightness', 500)
    assert adj.brightness == 200


def test_highlights_clamped_to_min():
    adj = AdjustmentVector().with_value('highlights', -500)
    assert adj.highlights == -100


def test_constructor_clamps_every_field():
    adj = AdjustmentVector(brightness=-10, contrast=999, saturation=250, highlights=101, shadows=-101)
    assert adj.as_dict() == {
        'brightness': 0, 'contrast': 200, 'saturation': 200,
        'highlights': 100, 'shadows': -100,
    }


def test_with_value_returns_new_vector():
    """Updates never mutate the original."""
    adj = AdjustmentVector()
    updated = adj.with_value('contrast', 150)
    assert adj.contrast == 100
    assert updated.contrast == 150
    assert not updated.is_neutral()


def test_unknown_adjustment_name_raises():
    with pytest.raises(KeyError):
        AdjustmentVector().with_value('exposure', 10)


def test_specs_match_slider_ranges():
    assert (ADJUSTMENT_SPECS['saturation'].minimum, ADJUSTMENT_SPECS['saturation'].maximum) == (0, 200)
    assert (ADJUSTMENT_SPECS['shadows'].minimum, ADJUSTMENT_SPECS['shadows'].maximum) == (-100, 100)
    assert all(spec.step == 5 for spec in ADJUSTMENT_SPECS.values())


@pytest.mark.parametrize("value", [float('nan'), float('inf'), float('-inf')])
def test_non_finite_values_fall_back_to_neutral(value):
    """NaN and infinities never reach the render pipeline."""
    adj = AdjustmentVector().with_value('brightness', value).with_value('shadows', value)
    assert adj.brightness == 100
    assert adj.shadows == 0
    assert AdjustmentVector(contrast=value).contrast == 100
