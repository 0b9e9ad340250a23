"""Data models and JSON helpers for app settings."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, get_origin, get_type_hints

from .logging_setup import LOG_FORMAT

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass
class TessellationConfig:
    """How finely arcs are split; ``segment_pixel_length=None`` means proportional."""

    segment_pixel_length: Optional[float] = None
    scale: float = 1.0
    minimum: int = 1
    maximum: int = 100
    segments_per_full_circle: int = 36

    def renderer_options(self) -> Dict[str, object]:
        return asdict(self)


@dataclass
class EasingConfig:
    curve: str = "cubic_in_out"
    duration: float = 1.5
    start: float = 0.0
    end: float = 1.0


@dataclass
class AppConfig:
    window_size: Tuple[int, int] = (960, 640)
    background_color: Color = (20, 24, 28)
    target_fps: int = 60
    log_level: str = "INFO"
    log_format: str = LOG_FORMAT
    tessellation: TessellationConfig = field(default_factory=TessellationConfig)
    easing: EasingConfig = field(default_factory=EasingConfig)


def _dataclass_from_dict(cls, data: Dict) -> object:
    """Build settings class ``cls`` from parsed JSON.

    Missing keys keep their defaults, JSON lists become tuples where the
    field is a tuple, and nested settings tables are built recursively.
    """
    field_types = get_type_hints(cls)
    kwargs = {}
    for key, value in data.items():
        expected = field_types.get(key)
        if expected is None:
            logger.debug("Ignoring unknown %s setting %r", cls.__name__, key)
            continue
        if is_dataclass(expected) and isinstance(value, dict):
            kwargs[key] = _dataclass_from_dict(expected, value)
        elif get_origin(expected) is tuple and isinstance(value, list):
            kwargs[key] = tuple(value)
        else:
            kwargs[key] = value
    return cls(**kwargs)


def load_json(path: Path, cls):
    """Read ``path`` and build ``cls`` from it; I/O and JSON errors propagate."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return _dataclass_from_dict(cls, data)


def save_json(path: Path, obj) -> None:
    # asdict recurses into nested settings; json writes tuples as lists
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(obj), indent=2) + "\n", encoding="utf-8")


def load_app_config(path: Optional[Path]) -> AppConfig:
    """Settings from ``path`` if it exists, defaults otherwise."""
    if path is None or not path.exists():
        return AppConfig()
    return load_json(path, AppConfig)
