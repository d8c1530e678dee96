"""Test fixtures for the hello-world pipeline.

Provides MJCF scenes with known body/joint/geom/DOF counts.
"""
from pathlib import Path

import pytest

from mjhello.types import ShapeType
from mjhello.pipeline.scene_builder import SceneBuilder


@pytest.fixture
def box_scene():
    """Ground plane and one free box, 10 cm half-size, dropped from z=1.
    
    Counts: 2 bodies, 1 joint, 2 geoms, 6 DOFs.
    """
    builder = SceneBuilder(model_name="box_drop", timestep=0.002)
    builder.add_ground()
    builder.add_body(
        name="box",
        position=[0, 0, 1],
        shape_type=ShapeType.BOX,
        shape_params=[0.1, 0.1, 0.1],
        mass=1.0
    )
    return builder


@pytest.fixture
def world_only_scene():
    """Just a ground plane: only the world body exists."""
    return SceneBuilder(model_name="empty_world").add_ground()


@pytest.fixture
def pendulum_scene():
    """Two-link hinge pendulum hanging from z=2 over a ground plane.
    
    Counts: 3 bodies, 2 joints, 3 geoms, 2 DOFs.
    """
    builder = SceneBuilder(model_name="double_pendulum", timestep=0.005)
    builder.add_ground()
    builder.add_pendulum(name="link", anchor=[0, 0, 2], n_links=2, link_length=0.5)
    return builder


@pytest.fixture
def write_scene(tmp_path):
    """Save a SceneBuilder to a temporary MJCF file and return its path."""
    def _write(builder: SceneBuilder, filename: str = "scene.xml") -> Path:
        return builder.save(tmp_path / filename)
    return _write


@pytest.fixture
def malformed_model_path(tmp_path):
    path = tmp_path / "broken.xml"
    path.write_text("this is not an MJCF document", encoding="utf-8")
    return path
