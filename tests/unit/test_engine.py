"""Tests for model loading and SimulationSession ownership."""
import logging

import mujoco
import numpy as np
import pytest

from mjhello.engine import SimulationSession, body_position, load_model
from mjhello.pipeline.error_handler import ModelLoadError, SimulationError


def test_load_model_counts(write_scene, box_scene):
    model = load_model(write_scene(box_scene))
    assert model.nbody == 2
    assert model.nv == 6


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ModelLoadError) as excinfo:
        load_model(tmp_path / "missing.xml")
    assert excinfo.value.diagnostic


def test_load_malformed_file_raises(malformed_model_path):
    with pytest.raises(ModelLoadError) as excinfo:
        load_model(malformed_model_path)
    assert str(excinfo.value) == excinfo.value.diagnostic


def test_step_advances_time_by_timestep(write_scene, box_scene):
    with SimulationSession.from_xml_path(write_scene(box_scene)) as session:
        assert session.time == 0.0
        session.step()
        assert session.time == pytest.approx(session.model.opt.timestep)


def test_run_until_stops_within_one_step(write_scene, pendulum_scene):
    with SimulationSession.from_xml_path(write_scene(pendulum_scene)) as session:
        dt = session.model.opt.timestep
        n_steps = session.run_until(1.0)
        assert 1.0 <= session.time < 1.0 + dt + 1e-9
        assert abs(n_steps * dt - session.time) <= dt


def test_run_until_runs_for_world_only_model(write_scene, world_only_scene):
    with SimulationSession.from_xml_path(write_scene(world_only_scene)) as session:
        assert session.run_until(0.1) > 0


def test_simulate_reports_requested_body(write_scene, pendulum_scene):
    with SimulationSession.from_xml_path(write_scene(pendulum_scene)) as session:
        result = session.simulate(duration=0.5, report_body=2)
    assert result.body_position.index == 2
    assert result.body_position.name == "link_1"
    assert result.body_position.xyz.shape == (3,)
    assert result.timestep == pytest.approx(0.005)


def test_simulate_skips_missing_body(write_scene, world_only_scene):
    with SimulationSession.from_xml_path(write_scene(world_only_scene)) as session:
        result = session.simulate(duration=0.1, report_body=1)
    assert result.body_position is None


def test_body_position_is_a_copy(write_scene, box_scene):
    with SimulationSession.from_xml_path(write_scene(box_scene)) as session:
        session.step()
        position = body_position(session.model, session.data, 1)
        before = position.xyz.copy()
        session.run_until(0.5)
        assert np.array_equal(position.xyz, before)
        assert position.label == "box"


def test_body_position_bounds(write_scene, box_scene):
    model = load_model(write_scene(box_scene))
    data = mujoco.MjData(model)
    assert body_position(model, data, -1) is None
    assert body_position(model, data, 2) is None
    assert body_position(model, data, 0).index == 0


def test_close_releases_state_then_model_once(write_scene, box_scene, caplog):
    caplog.set_level(logging.DEBUG, logger="mjhello.engine")
    session = SimulationSession.from_xml_path(write_scene(box_scene))
    session.close()
    session.close()
    
    released = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Released")]
    assert released == ["Released simulation state", "Released model"]
    assert session.closed


def test_closed_session_rejects_use(write_scene, box_scene):
    with SimulationSession.from_xml_path(write_scene(box_scene)) as session:
        pass
    with pytest.raises(SimulationError, match="closed"):
        session.step()
    with pytest.raises(SimulationError):
        session.summary()


def test_context_manager_closes_on_error(write_scene, box_scene):
    with pytest.raises(RuntimeError):
        with SimulationSession.from_xml_path(write_scene(box_scene)) as session:
            raise RuntimeError("boom")
    assert session.closed
