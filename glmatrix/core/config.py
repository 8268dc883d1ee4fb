# glmatrix/core/config.py
"""
ProjectionConfig - parameters for building a projection matrix.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Any, Dict
import logging
import math

from .matrix import TransformMatrix, deg_to_rad

logger = logging.getLogger(__name__)


class ProjectionMode(Enum):
    PERSPECTIVE = auto()
    ORTHOGRAPHIC = auto()


@dataclass
class ProjectionConfig:
    mode: ProjectionMode = ProjectionMode.PERSPECTIVE

    # Perspective
    fov_y_deg: float = 60.0
    aspect: float = 1.0

    # Shared clip planes
    near: float = 0.1
    far: float = 100.0

    # Orthographic extents
    left: float = -1.0
    right: float = 1.0
    bottom: float = -1.0
    top: float = 1.0

    def is_degenerate(self) -> bool:
        """True if applying this config divides by zero somewhere."""
        if self.far == self.near:
            return True
        if self.mode is ProjectionMode.PERSPECTIVE:
            return math.tan(deg_to_rad(self.fov_y_deg / 2)) == 0.0
        return self.right == self.left or self.top == self.bottom

    def apply(self, matrix: TransformMatrix) -> TransformMatrix:
        """Overwrite matrix with this projection and return it."""
        if self.is_degenerate():
            logger.warning(f"Degenerate projection config, matrix will hold inf/NaN: {self}")

        if self.mode is ProjectionMode.PERSPECTIVE:
            matrix.set_perspective(self.fov_y_deg, self.aspect, self.near, self.far)
        else:
            matrix.set_ortho(self.left, self.right, self.bottom, self.top,
                             self.near, self.far)

        logger.debug(f"Applied {self.mode.name} projection")
        return matrix

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> ProjectionConfig:
        """
        Build a config from a plain mapping (e.g. parsed YAML or JSON).

        Unknown keys are ignored. 'mode' is matched by enum name,
        case-insensitively.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in cfg.items():
            if key not in known:
                logger.debug(f"Ignoring unknown projection key: {key}")
                continue
            if key == "mode":
                if not isinstance(value, ProjectionMode):
                    name = str(value).upper()
                    if name not in ProjectionMode.__members__:
                        raise ValueError(f"Unknown projection mode: {value!r}")
                    value = ProjectionMode[name]
            else:
                value = float(value)
            kwargs[key] = value

        return cls(**kwargs)
