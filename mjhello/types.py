from enum import Enum
from typing import NamedTuple, Optional
import numpy as np

class ModelSummary(NamedTuple):
  nbody: int
  njnt: int
  ngeom: int
  nv: int
  timestep: float

  @classmethod
  def from_model(cls, model) -> 'ModelSummary':
    return cls(
      nbody=int(model.nbody),
      njnt=int(model.njnt),
      ngeom=int(model.ngeom),
      nv=int(model.nv),
      timestep=float(model.opt.timestep),
    )

class BodyPosition(NamedTuple):
  index: int
  name: str
  xyz: np.ndarray

  @property
  def label(self) -> str:
    return self.name if self.name else f"body {self.index}"

class SimulationResult(NamedTuple):
  n_steps: int
  final_time: float
  timestep: float
  wall_time: float
  body_position: Optional[BodyPosition] = None

  @property
  def steps_per_second(self) -> float:
    return self.n_steps / self.wall_time if self.wall_time > 0 else float('inf')

class ShapeType(Enum):
  SPHERE = "sphere"
  BOX = "box"
  CAPSULE = "capsule"

  @property
  def mjcf_name(self) -> str:
    return self.value
