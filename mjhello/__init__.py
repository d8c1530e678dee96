from .types import BodyPosition, ModelSummary, ShapeType, SimulationResult
from .engine import SimulationSession, body_position, load_model

__version__ = "0.1.0"

__all__ = ['BodyPosition', 'ModelSummary', 'ShapeType', 'SimulationResult', 'SimulationSession', 'body_position', 'load_model']
