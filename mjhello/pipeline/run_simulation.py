"""Simulation runner for the hello-world pipeline.

Owns the load -> report -> step -> report -> release sequence for one
configured run; argument handling and exit codes stay in ``mjhello.main``.
"""
import logging

from ..engine import SimulationSession
from ..types import SimulationResult
from .config import SimulationConfig
from .output_handler import SimulationOutputHandler

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Runs one MuJoCo model for a configured simulated duration."""
    
    def __init__(self, config: SimulationConfig, output: SimulationOutputHandler | None = None):
        """Initialize the simulation runner.
        
        Args:
            config: Model path, duration and reported body index
            output: Handler used for the stdout report
        """
        self.config = config
        self.output = output or SimulationOutputHandler()
    
    def run(self) -> SimulationResult:
        """Execute the simulation.
        
        Returns:
            The step count, final time and reported body position
            
        Raises:
            ModelLoadError: If the model file cannot be compiled
        """
        with SimulationSession.from_xml_path(self.config.model_path) as session:
            self.output.print_model_info(self.config.model_path, session.summary())
            self.output.print_simulation_start(self.config.duration)
            
            result = session.simulate(self.config.duration, self.config.report_body)
            
            if result.body_position is None:
                logger.info(f"Model has no body {self.config.report_body}; skipping position report")
            self.output.print_simulation_complete(result)
        
        return result
