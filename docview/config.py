"""Runtime settings for viewers embedding docview."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping

from .types import InterpolationQuality
from .utils import update_dict


class PanSpeed(Enum):
    """Keyboard pan step as a fraction of the canvas size."""

    SLOW = 0.10
    NORMAL = 0.25
    FAST = 0.50

    @property
    def multiplier(self) -> float:
        return self.value


@dataclass(slots=True)
class ViewerSettings:
    """Options controlling zoom, panning, resampling and thumbnails."""

    zoom_step: float = 0.10
    min_zoom: float = 0.05
    max_zoom: float = 20.0
    min_overlap: float = 32.0
    pan_speed: PanSpeed = PanSpeed.NORMAL
    interpolation: InterpolationQuality = InterpolationQuality.BALANCED
    thumbnail_size: tuple[int, int] = field(default=(160, 160))
    jpeg_quality: int = 90

    def __post_init__(self) -> None:
        if not 0.0 < self.zoom_step < 1.0:
            raise ValueError(f"zoom_step must be between 0 and 1, got {self.zoom_step}")
        if self.min_zoom <= 0 or self.max_zoom < self.min_zoom:
            raise ValueError(
                f"Invalid zoom limits: min_zoom={self.min_zoom}, max_zoom={self.max_zoom}"
            )
        if self.min_overlap < 0:
            raise ValueError(f"min_overlap must not be negative, got {self.min_overlap}")
        if len(self.thumbnail_size) != 2 or min(self.thumbnail_size) < 1:
            raise ValueError(f"Invalid thumbnail_size: {self.thumbnail_size!r}")
        if not 1 <= self.jpeg_quality <= 100:
            raise ValueError(f"jpeg_quality must be within 1..100, got {self.jpeg_quality}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ViewerSettings":
        known = {item.name for item in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")

        data = update_dict({}, **dict(values))
        if "pan_speed" in data and not isinstance(data["pan_speed"], PanSpeed):
            try:
                data["pan_speed"] = PanSpeed[str(data["pan_speed"]).upper()]
            except KeyError:
                raise ValueError(f"Unknown pan_speed: {data['pan_speed']!r}") from None
        if "interpolation" in data and not isinstance(data["interpolation"], InterpolationQuality):
            data["interpolation"] = InterpolationQuality(str(data["interpolation"]).lower())
        if "thumbnail_size" in data:
            data["thumbnail_size"] = _parse_size(data["thumbnail_size"])
        for name in ("zoom_step", "min_zoom", "max_zoom", "min_overlap"):
            if name in data:
                data[name] = float(data[name])
        if "jpeg_quality" in data:
            data["jpeg_quality"] = int(data["jpeg_quality"])
        return cls(**data)

    @classmethod
    def from_env(cls, prefix: str = "DOCVIEW_", environ: Mapping[str, str] | None = None) -> "ViewerSettings":
        source = os.environ if environ is None else environ
        values = {
            item.name: source.get(prefix + item.name.upper())
            for item in fields(cls)
        }
        return cls.from_mapping(values)


def _parse_size(value: Any) -> tuple[int, int]:
    if isinstance(value, str):
        parts = value.lower().replace("x", ",").split(",")
    else:
        parts = list(value)
    if len(parts) != 2:
        raise ValueError(f"Expected a WIDTHxHEIGHT size, got {value!r}")
    return (int(parts[0]), int(parts[1]))
