# examples/camera_demo.py
"""
Camera Demo - Orbit a camera and dump its uniform payloads.

Demonstrates:
- Camera driving TransformMatrix projection/model rebuilds
- ProjectionConfig loaded from a plain dict
- Column-major float32 payloads as a GL uniform write would see them

Run with:
    python examples/camera_demo.py
"""

import logging
import math
import sys
import os

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from glmatrix import Camera, ProjectionConfig

logger = logging.getLogger("camera_demo")


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    config = ProjectionConfig.from_dict({
        "mode": "perspective",
        "fov_y_deg": 70,
        "near": 0.1,
        "far": 150,
    })
    camera = Camera(config=config)
    camera.resize(1280, 720)

    for step in range(4):
        camera.orbit(math.pi / 8, 0.05)
        camera.zoom(-0.5)

        for name, matrix in camera.uniforms().items():
            # rows of the buffer are columns of the matrix
            data = np.frombuffer(matrix.to_bytes(), dtype=np.float32).reshape(4, 4)
            logger.info(f"frame {step} {name}:\n{data.T}")


if __name__ == "__main__":
    main()
