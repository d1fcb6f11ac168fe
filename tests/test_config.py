import json

import pytest

from timeline.config import Config, DEFAULT_CONFIG, GenreGroup, TimelineConfig
from timeline.core.errors import ConfigError


def test_defaults():
    config = Config()

    assert config.timeline.point.size == 3
    assert config.timeline.point.max_margin == 3
    assert config.timeline.zoom_delta_factor == 0.002
    assert config.timeline.min_time_range == 24 * 60 * 60 * 1000
    assert config.timeline.point.color_value_factors.genre.saturation == 1.2
    assert 'Rock' in config.genre_groups
    assert not config.debug


def test_genre_group_lookup():
    assert DEFAULT_CONFIG.genre_group_of('Classic Rock') == 'Rock'
    assert DEFAULT_CONFIG.genre_group_of('House') == 'Electronic'
    assert DEFAULT_CONFIG.genre_group_of('Vaporwave') is None
    assert DEFAULT_CONFIG.genre_group_of(None) is None


def test_from_dict_camel_case():
    config = Config.from_dict({
        'timeline': {
            'zoomDeltaFactor': 0.01,
            'point': {'maxMargin': 1, 'selectedColor': '#ff0'},
            'timeAxis': {'width': 2},
        },
        'genreGroups': {
            'Noise': {'genres': ['Harsh Noise'], 'colorRange': ['#111', '#eee']},
        },
        'debug': True,
    })

    assert config.timeline.zoom_delta_factor == 0.01
    assert config.timeline.point.max_margin == 1
    assert config.timeline.point.selected_color == '#ff0'
    assert config.timeline.time_axis.width == 2
    assert config.genre_groups == {'Noise': GenreGroup(('Harsh Noise',), ('#111', '#eee'))}
    assert config.debug


def test_from_dict_snake_case():
    config = Config.from_dict({'timeline': {'min_time_range': 1000}})
    assert config.timeline.min_time_range == 1000
    # untouched sections keep their defaults
    assert config.genre_groups == DEFAULT_CONFIG.genre_groups


def test_unknown_option_rejected():
    with pytest.raises(ConfigError, match="unknown option 'zoomSpeed'"):
        Config.from_dict({'timeline': {'zoomSpeed': 2}})


@pytest.mark.parametrize('data', [
    {'timeline': {'point': {'size': 0}}},
    {'timeline': {'minTimeRange': 0}},
    {'timeline': {'point': {'selectedColor': 'white'}}},
    {'timeline': {'unknownGenreColorRange': ['#000']}},
    {'genreGroups': {'Bad': {'colorRange': ['#000', '#12345']}}},
    {'timeline': 3},
])
def test_invalid_values_rejected(data):
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_to_dict_round_trip():
    assert Config.from_dict(DEFAULT_CONFIG.to_dict()) == DEFAULT_CONFIG


def test_with_overrides():
    config = DEFAULT_CONFIG.with_overrides(min_time_range=3600000, debug=True)

    assert config.timeline.min_time_range == 3600000
    assert config.debug
    # DEFAULT_CONFIG untouched
    assert DEFAULT_CONFIG.timeline.min_time_range == TimelineConfig().min_time_range

    with pytest.raises(ConfigError):
        DEFAULT_CONFIG.with_overrides(zoom_delta_factor=-1)


def test_load(tmp_path):
    path = tmp_path / 'timeline.json'
    path.write_text(json.dumps({'timeline': {'resizeDelay': 0.25}}), encoding='utf-8')

    assert Config.load(path).timeline.resize_delay == 0.25

    path.write_text('{not json', encoding='utf-8')
    with pytest.raises(ConfigError):
        Config.load(path)


def test_default_config_built_at_import():
    import timeline
    from timeline import config

    assert config.DEFAULT_CONFIG == Config()
    assert timeline.DEFAULT_CONFIG is config.DEFAULT_CONFIG
