"""Utilities shared by docview modules."""

from __future__ import annotations

import logging
import math
from typing import Any

from .exceptions import InvalidValueError


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def update_dict(target: dict[str, Any], **updates: Any) -> dict[str, Any]:
    target.update({k: v for k, v in updates.items() if v is not None})
    return target


def normalize_degrees(angle: float) -> float:
    """Fold *angle* into ``[0, 360)``; NaN and infinities raise :class:`InvalidValueError`."""

    if not math.isfinite(angle):
        raise InvalidValueError(f"Angle must be a finite number of degrees, got {angle!r}")
    folded = math.fmod(float(angle), 360.0)
    if folded < 0:
        folded += 360.0
    # fmod(-0.0) and tiny negative residues both land on 360.0 after the shift
    return 0.0 if folded >= 360.0 else folded


def format_file_size(size_bytes: float) -> str:
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
