import logging
import time
from pathlib import Path
import numpy as np
import mujoco
from .types import BodyPosition, ModelSummary, SimulationResult
from .pipeline.error_handler import ModelLoadError, PhysicsEngineError, SimulationError

logger = logging.getLogger(__name__)

def load_model(model_path: Path) -> mujoco.MjModel:
  """Compile an MJCF file into a model, surfacing MuJoCo's diagnostic on failure."""
  try:
    model = mujoco.MjModel.from_xml_path(str(model_path))
  except (ValueError, OSError) as e:
    raise ModelLoadError(str(e) or "Could not load model") from e
  logger.info(f"Loaded model from {model_path} (nbody={model.nbody}, nv={model.nv})")
  return model

def body_position(model: mujoco.MjModel, data: mujoco.MjData, index: int) -> BodyPosition | None:
  # Body 0 is the world body, so a model always has at least one.
  if index < 0 or index >= model.nbody:
    return None
  return BodyPosition(index=index, name=model.body(index).name, xyz=np.array(data.xpos[index], dtype=np.float64))

class SimulationSession:
  """Owns one model and the simulation state allocated for it.

  State is released before the model, each exactly once, when the session is
  closed or its ``with`` block exits.
  """

  def __init__(self, model: mujoco.MjModel):
    self._model = model
    self._data = mujoco.MjData(model)
    self._closed = False
    logger.info(f"Allocated simulation state (nq={model.nq}, nv={model.nv})")

  @classmethod
  def from_xml_path(cls, model_path: Path) -> 'SimulationSession':
    return cls(load_model(model_path))

  @property
  def closed(self) -> bool:
    return self._closed

  @property
  def model(self) -> mujoco.MjModel:
    self._check_open()
    return self._model

  @property
  def data(self) -> mujoco.MjData:
    self._check_open()
    return self._data

  @property
  def time(self) -> float:
    return float(self.data.time)

  def summary(self) -> ModelSummary:
    return ModelSummary.from_model(self.model)

  def step(self) -> None:
    mujoco.mj_step(self.model, self.data)

  def run_until(self, duration: float) -> int:
    model, data = self.model, self.data
    if model.opt.timestep <= 0:
      raise PhysicsEngineError(f"Model timestep must be positive, got {model.opt.timestep}")
    n_steps = 0
    while data.time < duration:
      mujoco.mj_step(model, data)
      n_steps += 1
    return n_steps

  def simulate(self, duration: float, report_body: int = 1) -> SimulationResult:
    start = time.perf_counter()
    n_steps = self.run_until(duration)
    wall_time = time.perf_counter() - start
    logger.info(f"Stepped {n_steps} times to t={self.time:.3f} in {wall_time:.3f}s")
    return SimulationResult(
      n_steps=n_steps,
      final_time=self.time,
      timestep=float(self.model.opt.timestep),
      wall_time=wall_time,
      body_position=body_position(self.model, self.data, report_body),
    )

  def close(self) -> None:
    if self._closed:
      return
    self._closed = True
    self._data = None
    logger.debug("Released simulation state")
    self._model = None
    logger.debug("Released model")

  def _check_open(self) -> None:
    if self._closed:
      raise SimulationError("Simulation session is closed")

  def __enter__(self) -> 'SimulationSession':
    return self

  def __exit__(self, exc_type, exc, tb) -> None:
    self.close()
