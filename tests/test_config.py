import logging

import numpy as np
import pytest

from glmatrix.core.config import ProjectionConfig, ProjectionMode
from glmatrix.core.matrix import TransformMatrix


def test_defaults_are_perspective():
    cfg = ProjectionConfig()
    assert cfg.mode is ProjectionMode.PERSPECTIVE
    assert cfg.fov_y_deg == 60.0
    assert not cfg.is_degenerate()

def test_apply_perspective_matches_direct_call():
    cfg = ProjectionConfig(fov_y_deg=75.0, aspect=1.6, near=0.5, far=250.0)
    via_config = cfg.apply(TransformMatrix())

    direct = TransformMatrix()
    direct.set_perspective(75.0, 1.6, 0.5, 250.0)
    assert via_config == direct

def test_apply_ortho_matches_direct_call():
    cfg = ProjectionConfig(mode=ProjectionMode.ORTHOGRAPHIC,
                           left=-4, right=4, bottom=-3, top=3, near=1, far=21)
    mat = TransformMatrix()
    assert cfg.apply(mat) is mat

    direct = TransformMatrix()
    direct.set_ortho(-4, 4, -3, 3, 1, 21)
    assert mat == direct
    assert mat.values[0] == pytest.approx(0.25)

def test_degenerate_detection():
    assert ProjectionConfig(near=1.0, far=1.0).is_degenerate()
    assert ProjectionConfig(fov_y_deg=0.0).is_degenerate()
    assert ProjectionConfig(mode=ProjectionMode.ORTHOGRAPHIC, left=2, right=2).is_degenerate()
    assert not ProjectionConfig(mode=ProjectionMode.ORTHOGRAPHIC).is_degenerate()

def test_degenerate_apply_warns_but_still_writes(caplog):
    cfg = ProjectionConfig(near=2.0, far=2.0)
    with caplog.at_level(logging.WARNING, logger="glmatrix.core.config"):
        mat = cfg.apply(TransformMatrix())
    assert "Degenerate" in caplog.text
    assert np.isinf(mat.values[10])

def test_from_dict():
    cfg = ProjectionConfig.from_dict({
        "mode": "orthographic",
        "left": "-2",
        "right": 2,
        "near": 0.5,
        "far": 10,
        "window_title": "ignored",
    })
    assert cfg.mode is ProjectionMode.ORTHOGRAPHIC
    assert cfg.left == -2.0
    assert cfg.right == 2.0
    assert cfg.top == 1.0

def test_from_dict_accepts_enum():
    cfg = ProjectionConfig.from_dict({"mode": ProjectionMode.PERSPECTIVE, "fov_y_deg": 45})
    assert cfg.mode is ProjectionMode.PERSPECTIVE
    assert cfg.fov_y_deg == 45.0

def test_from_dict_rejects_unknown_mode():
    with pytest.raises(ValueError):
        ProjectionConfig.from_dict({"mode": "fisheye"})
