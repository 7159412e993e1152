"""Tests for the filter preset table."""

import pytest
from engines.color_ops import brightness, contrast, grayscale, hue_rotate, invert, saturate, sepia
from engines.filter_catalog import (
    FILTER_IDS, MONOCHROME_GROUP, COLOR_GROUP, NONE_FILTER,
    get_preset, list_presets, normalize_filter_id, resolve,
)


def test_catalog_has_fifteen_presets_plus_none():
    assert len(FILTER_IDS) == 16
    assert FILTER_IDS[0] == NONE_FILTER
    assert len(list_presets()) == 15


def test_none_resolves_to_empty_sequence():
    assert resolve('none') == ()


def test_unknown_filter_fails_closed():
    assert resolve('does-not-exist') == ()
    assert normalize_filter_id('does-not-exist') == NONE_FILTER
    assert normalize_filter_id(None) == NONE_FILTER


PRESET_TABLE = [
    ('vibrant', (saturate(1.5), contrast(1.1))),
    ('negative', (invert(1.0),)),
    ('natural', (brightness(1.05), saturate(1.05))),
    ('luminous', (brightness(1.15), contrast(1.05))),
    ('dramatic', (contrast(1.25), saturate(1.1), brightness(0.95))),
    ('quiet', (saturate(0.9), brightness(0.95))),
    ('cosy', (sepia(0.25), saturate(1.15), brightness(1.0))),
    ('ethereal', (brightness(1.1), contrast(0.9), saturate(0.9))),
    ('bw', (grayscale(1.0),)),
    ('binary', (contrast(2.0), grayscale(1.0), brightness(1.5))),
    ('amber', (sepia(0.6),)),
    ('gold', (sepia(0.5), saturate(1.5), brightness(1.05))),
    ('rosegold', (sepia(0.3), saturate(1.3), hue_rotate(330))),
    ('neutral', (saturate(0.8), brightness(1.0))),
    ('coolrose', (saturate(0.9), hue_rotate(330))),
]


def test_table_covers_every_preset():
    assert [name for name, _ in PRESET_TABLE] == [p.name for p in list_presets()]


@pytest.mark.parametrize("name,ops", PRESET_TABLE)
def test_preset_composition(name, ops):
    """Each preset resolves to exactly these ops, in this order."""
    assert resolve(name) == ops


def test_resolve_is_deterministic():
    for name in FILTER_IDS:
        assert resolve(name) == resolve(name)


def test_groups_match_sidebar_sections():
    mono = [p.name for p in list_presets(MONOCHROME_GROUP)]
    assert mono == ['bw', 'binary', 'amber', 'gold', 'rosegold', 'neutral', 'coolrose']
    color = [p.name for p in list_presets(COLOR_GROUP)]
    assert color == ['vibrant', 'negative', 'natural', 'luminous', 'dramatic', 'quiet', 'cosy', 'ethereal']


def test_labels():
    assert get_preset('bw').label == 'B&W'
    assert get_preset('rosegold').label == 'Rose Gold'
    assert get_preset('none').label == 'Original'
