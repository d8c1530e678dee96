"""Output handling module for simulation results.

Everything here goes to stdout; log records go to stderr through logging.
"""
from pathlib import Path

from ..types import ModelSummary, SimulationResult


class SimulationOutputHandler:
    """Handles all output operations for simulation results."""
    
    def __init__(self, verbose: bool = False):
        """Initialize the output handler.
        
        Args:
            verbose: Whether to print wall-clock metrics
        """
        self.verbose = verbose
    
    def print_load_error(self, diagnostic: str) -> None:
        print(f"Load model error: {diagnostic}")
    
    def print_error(self, message: str) -> None:
        print(f"Error: {message}")
    
    def print_model_info(self, model_path: Path, summary: ModelSummary) -> None:
        """Print the banner and the model's counts.
        
        Args:
            model_path: Path the model was loaded from
            summary: Counts extracted from the loaded model
        """
        print("MuJoCo Hello World!")
        print(f"Model loaded successfully: {model_path}")
        print(f"Number of bodies: {summary.nbody}")
        print(f"Number of joints: {summary.njnt}")
        print(f"Number of geoms: {summary.ngeom}")
        print(f"Number of DOFs: {summary.nv}")
        print()
    
    def print_simulation_start(self, duration: float) -> None:
        print(f"Running simulation for {duration:g} seconds...")
    
    def print_simulation_complete(self, result: SimulationResult) -> None:
        """Print simulation completion summary.
        
        Args:
            result: Outcome of the stepping loop
        """
        print("Simulation complete!")
        print(f"Total steps: {result.n_steps}")
        print(f"Final time: {result.final_time:.3f} seconds")
        print(f"Timestep: {result.timestep:.5f} seconds")
        
        if result.body_position is not None:
            self.print_body_position(result)
        
        if self.verbose:
            self.print_metrics(result)
    
    def print_body_position(self, result: SimulationResult) -> None:
        position = result.body_position
        x, y, z = position.xyz
        print(f"\nFinal position of {position.label}:")
        print(f"  x: {x:.3f}")
        print(f"  y: {y:.3f}")
        print(f"  z: {z:.3f}")
    
    def print_metrics(self, result: SimulationResult) -> None:
        print(f"\nWall time: {result.wall_time:.3f} seconds")
        print(f"Steps per second: {result.steps_per_second:.1f}")
