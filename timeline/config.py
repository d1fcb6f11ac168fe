# timeline/config.py
"""
Configuration - immutable dataclasses with shipped defaults.

Recognized layout (JSON, camelCase or snake_case keys):

    {
      "timeline": {
        "point": {"size": 3, "maxMargin": 3, "selectedColor": "#fff",
                  "colorValueFactors": {"genre":  {"saturation": .., "lightness": ..},
                                        "artist": {...}, "other": {...}}},
        "plot": {"padding": 20},
        "timeAxis": {"width": 1},
        "zoomDeltaFactor": 0.002,
        "minTimeRange": 86400000,
        "resizeDelay": 0.1,
        "unknownGenreColorRange": ["#333", "#ccc"]
      },
      "genreGroups": {"Rock": {"genres": [...], "colorRange": ["#..", "#.."]}},
      "debug": false
    }
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union, get_type_hints
import json
import re

from .core.errors import ConfigError
from .model.color import hex_to_rgb

HOUR_MS = 60 * 60 * 1000


# =============================================================================
# Sections
# =============================================================================

@dataclass(frozen=True)
class ValueFactors:
    """Saturation/lightness multipliers applied to a base color."""
    saturation: float = 1.0
    lightness: float = 1.0


@dataclass(frozen=True)
class ColorValueFactors:
    genre: ValueFactors = ValueFactors(saturation=1.2, lightness=1.15)
    artist: ValueFactors = ValueFactors(saturation=1.5, lightness=1.4)
    other: ValueFactors = ValueFactors(saturation=0.7, lightness=0.75)


@dataclass(frozen=True)
class PointConfig:
    size: int = 3
    max_margin: int = 3
    selected_color: str = '#ffffff'
    color_value_factors: ColorValueFactors = ColorValueFactors()


@dataclass(frozen=True)
class PlotConfig:
    padding: int = 20


@dataclass(frozen=True)
class TimeAxisConfig:
    width: int = 1


@dataclass(frozen=True)
class GenreGroup:
    genres: Tuple[str, ...] = ()
    color_range: Tuple[str, str] = ('#444444', '#bbbbbb')


@dataclass(frozen=True)
class TimelineConfig:
    point: PointConfig = PointConfig()
    plot: PlotConfig = PlotConfig()
    time_axis: TimeAxisConfig = TimeAxisConfig()
    zoom_delta_factor: float = 0.002
    min_time_range: int = 24 * HOUR_MS
    resize_delay: float = 0.1     # seconds
    unknown_genre_color_range: Tuple[str, str] = ('#3a3a3a', '#d0d0d0')


def _default_genre_groups() -> Dict[str, GenreGroup]:
    return {
        'Rock': GenreGroup(
            genres=('Rock', 'Classic Rock', 'Hard Rock', 'Alternative Rock', 'Indie Rock',
                    'Progressive Rock', 'Psychedelic Rock', 'Post-Rock', 'Grunge'),
            color_range=('#7a1f1f', '#ff6b6b'),
        ),
        'Metal': GenreGroup(
            genres=('Heavy Metal', 'Thrash Metal', 'Death Metal', 'Black Metal',
                    'Doom Metal', 'Progressive Metal', 'Metalcore'),
            color_range=('#5a3a1a', '#e39b4a'),
        ),
        'Punk': GenreGroup(
            genres=('Punk', 'Post-Punk', 'Hardcore Punk', 'Pop Punk'),
            color_range=('#6b5a10', '#ffd93d'),
        ),
        'Electronic': GenreGroup(
            genres=('Electronic', 'House', 'Techno', 'Trance', 'Drum and Bass',
                    'Dubstep', 'Ambient', 'IDM', 'Synthpop'),
            color_range=('#0f3f66', '#4d96ff'),
        ),
        'Pop': GenreGroup(
            genres=('Pop', 'Indie Pop', 'Dream Pop', 'K-Pop', 'Dance Pop'),
            color_range=('#5c1f52', '#ff7de9'),
        ),
        'Hip-Hop': GenreGroup(
            genres=('Hip-Hop', 'Rap', 'Trip-Hop', 'Grime'),
            color_range=('#3d2a66', '#b48cff'),
        ),
        'Jazz & Blues': GenreGroup(
            genres=('Jazz', 'Blues', 'Soul', 'Funk', 'Rhythm and Blues'),
            color_range=('#1f5a3a', '#6bcb77'),
        ),
        'Folk': GenreGroup(
            genres=('Folk', 'Singer-Songwriter', 'Country', 'Americana'),
            color_range=('#4a5a1f', '#c5e06b'),
        ),
        'Classical': GenreGroup(
            genres=('Classical', 'Soundtrack', 'Contemporary Classical'),
            color_range=('#1f5a5a', '#6bd6d6'),
        ),
    }


@dataclass(frozen=True)
class Config:
    timeline: TimelineConfig = TimelineConfig()
    genre_groups: Dict[str, GenreGroup] = field(default_factory=_default_genre_groups)
    debug: bool = False

    def __post_init__(self):
        _validate(self)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def genre_group_of(self, genre: Optional[str]) -> Optional[str]:
        if genre is None:
            return None
        for name, group in self.genre_groups.items():
            if genre in group.genres:
                return name
        return None

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return _to_dict(self)

    def with_overrides(self, **kwargs) -> Config:
        """New config with top-level or timeline-level fields replaced."""
        timeline_keys = {f.name for f in fields(TimelineConfig)}
        timeline_kwargs = {k: kwargs.pop(k) for k in list(kwargs) if k in timeline_keys}
        config = replace(self, **kwargs) if kwargs else self
        if timeline_kwargs:
            config = replace(config, timeline=replace(config.timeline, **timeline_kwargs))
        return config

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Config:
        data = dict(data)
        groups = data.pop('genreGroups', data.pop('genre_groups', None))
        config = _from_dict(Config, {k: v for k, v in data.items()})
        if groups is not None:
            config = replace(config, genre_groups={
                name: _from_dict(GenreGroup, group) for name, group in groups.items()
            })
        return config

    @staticmethod
    def load(path: Union[str, Path]) -> Config:
        try:
            data = json.loads(Path(path).read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from e
        return Config.from_dict(data)


# =============================================================================
# Helpers
# =============================================================================

_CAMEL = re.compile(r'(?<!^)(?=[A-Z])')


def _snake(key: str) -> str:
    return _CAMEL.sub('_', key).lower()


def _from_dict(cls, data: Dict[str, Any]):
    if not isinstance(data, dict):
        raise ConfigError(f"{cls.__name__}: expected a mapping, got {type(data).__name__}")

    hints = get_type_hints(cls)
    known = {f.name for f in fields(cls) if f.name != 'genre_groups'}
    kwargs = {}

    for raw_key, value in data.items():
        key = _snake(raw_key)
        if key not in known:
            raise ConfigError(f"{cls.__name__}: unknown option {raw_key!r}")

        hint = hints[key]
        if is_dataclass(hint):
            value = _from_dict(hint, value)
        elif isinstance(value, list):
            value = tuple(value)
        kwargs[key] = value

    return cls(**kwargs)


def _to_dict(obj) -> Any:
    if is_dataclass(obj):
        return {f.name: _to_dict(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {k: _to_dict(v) for k, v in obj.items()}
    if isinstance(obj, tuple):
        return list(obj)
    return obj


def _validate(config: Config):
    tl = config.timeline
    if tl.point.size < 1:
        raise ConfigError(f"point.size must be >= 1, got {tl.point.size}")
    if tl.point.max_margin < 0:
        raise ConfigError(f"point.max_margin must be >= 0, got {tl.point.max_margin}")
    if tl.min_time_range <= 0:
        raise ConfigError(f"min_time_range must be > 0, got {tl.min_time_range}")
    if tl.zoom_delta_factor <= 0:
        raise ConfigError(f"zoom_delta_factor must be > 0, got {tl.zoom_delta_factor}")
    if tl.plot.padding < 0:
        raise ConfigError(f"plot.padding must be >= 0, got {tl.plot.padding}")

    hex_to_rgb(tl.point.selected_color)
    ranges = [('unknown_genre_color_range', tl.unknown_genre_color_range)]
    ranges += [(f"genre_groups.{name}.color_range", g.color_range) for name, g in config.genre_groups.items()]
    for name, color_range in ranges:
        if len(color_range) != 2:
            raise ConfigError(f"{name} must hold exactly two colors")
        for color in color_range:
            hex_to_rgb(color)


DEFAULT_CONFIG = Config()
