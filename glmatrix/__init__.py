# glmatrix/__init__.py
"""
glmatrix - 4x4 transform matrices for real-time rendering.

Core components:
- TransformMatrix: Column-major 4x4 matrix with in-place rotate/translate
- ProjectionConfig: Perspective/orthographic projection parameters
- Camera: Orbit camera owning projection and model matrices
"""

from .core.matrix import TransformMatrix, deg_to_rad
from .core.config import ProjectionConfig, ProjectionMode
from .scene.camera import Camera

__all__ = [
    "TransformMatrix",
    "deg_to_rad",
    "ProjectionConfig",
    "ProjectionMode",
    "Camera",
]
