import pytest

from timeline.config import DEFAULT_CONFIG
from timeline.model.color import HSL, hex_to_rgb, rgb_to_hex
from timeline.core.errors import ConfigError
from timeline.plot.colors import ColorMapper, HighlightContext


@pytest.fixture
def mapper():
    return ColorMapper(DEFAULT_CONFIG, max_album_playcount=50)


def test_hex_parsing():
    assert hex_to_rgb('#fff') == (1.0, 1.0, 1.0)
    assert rgb_to_hex(hex_to_rgb('#7a1f1f')) == '#7a1f1f'

    with pytest.raises(ConfigError):
        hex_to_rgb('#ggg')


def test_hsl_from_hex():
    red = HSL.from_hex('#ff0000')
    assert (red.h, red.s, red.l) == (0.0, 1.0, 0.5)
    assert red.to_hex() == '#ff0000'
    assert str(red) == 'hsl(0.0, 100.0%, 50.0%)'


def test_channels_stay_in_unit_range(mapper):
    groups = list(DEFAULT_CONFIG.genre_groups) + [None, 'Vaporwave']

    for group in groups:
        for popularity in (-5, 0, 1, 25, 50, 500):
            for context in HighlightContext:
                color = mapper.color_for(group, popularity, context)
                assert 0.0 <= color.s <= 1.0
                assert 0.0 <= color.l <= 1.0


def test_unknown_group_uses_neutral_scale(mapper):
    assert mapper.color_for('Vaporwave', 10) == mapper.color_for(None, 10)
    assert mapper.color_for('Rock', 10) != mapper.color_for(None, 10)


def test_popularity_moves_along_range(mapper):
    # the Rock range runs dark to light
    assert mapper.color_for('Rock', 1).l < mapper.color_for('Rock', 50).l
    # out of domain values clamp to the range ends
    assert mapper.color_for('Rock', 500) == mapper.color_for('Rock', 50)


def test_highlight_contexts_differ(mapper):
    default = mapper.color_for('Electronic', 10)
    genre = mapper.color_for('Electronic', 10, HighlightContext.GENRE)
    artist = mapper.color_for('Electronic', 10, HighlightContext.ARTIST)

    assert default.l < genre.l < artist.l
    assert default.h == genre.h == artist.h


def test_selected_color(mapper):
    assert mapper.selected_color.l == 1.0
