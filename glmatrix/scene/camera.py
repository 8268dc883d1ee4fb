# glmatrix/scene/camera.py
"""
Camera - orbit camera owning a projection and a model matrix.

Both matrices are rebuilt from scratch by update() using only the
in-place TransformMatrix operations.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple
import logging
import math

from ..core.config import ProjectionConfig
from ..core.matrix import TransformMatrix

logger = logging.getLogger(__name__)


@dataclass
class Camera:
    """
    Mutable camera state for interactive editing.

    pitch/yaw are radians, config.fov_y_deg is degrees.
    """

    config: ProjectionConfig = field(default_factory=ProjectionConfig)
    pitch: float = 0.0
    yaw: float = 0.0
    distance: float = 6.0
    target: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    min_distance: float = 0.5
    min_fov_deg: float = 10.0
    max_fov_deg: float = 170.0

    projection: TransformMatrix = field(init=False, repr=False)
    model: TransformMatrix = field(init=False, repr=False)

    def __post_init__(self):
        self.projection = TransformMatrix()
        self.model = TransformMatrix()
        self.update()

    def update(self):
        """Rebuild projection and model matrices from current state."""
        self.config.apply(self.projection)

        tx, ty, tz = self.target
        self.model.set_identity()
        self.model.x_rotate(self.pitch)
        self.model.y_rotate(self.yaw)
        self.model.x_translate(-tx)
        self.model.y_translate(-ty)
        self.model.z_translate(-tz - self.distance)

    def orbit(self, dyaw: float, dpitch: float):
        """Adjust orbital angles by delta (radians). Pitch stops at the poles."""
        self.yaw += dyaw
        self.pitch = max(-math.pi / 2, min(math.pi / 2, self.pitch + dpitch))
        logger.debug(f"Camera orbit: yaw={self.yaw:.3f} pitch={self.pitch:.3f}")
        self.update()

    def zoom(self, delta: float):
        """Positive = further, negative = closer."""
        self.distance = max(self.min_distance, self.distance + delta)
        logger.debug(f"Camera zoom: distance={self.distance:.3f}")
        self.update()

    def adjust_fov(self, delta: float):
        self.config.fov_y_deg = max(self.min_fov_deg,
                                    min(self.max_fov_deg, self.config.fov_y_deg + delta))
        logger.debug(f"Camera fov: {self.config.fov_y_deg:.1f} deg")
        self.update()

    def resize(self, width: float, height: float):
        if height <= 0:
            logger.warning(f"Ignoring camera resize to non-positive height: {width}x{height}")
            return
        self.config.aspect = width / height
        logger.debug(f"Camera resize: aspect={self.config.aspect:.3f}")
        self.update()

    def uniforms(self) -> Dict[str, TransformMatrix]:
        return {
            "u_projection": self.projection,
            "u_model": self.model,
        }
