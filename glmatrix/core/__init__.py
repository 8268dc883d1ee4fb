"""Matrix core and projection config."""

from .matrix import TransformMatrix, deg_to_rad
from .config import ProjectionConfig, ProjectionMode
