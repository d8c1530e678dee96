"""Error handling module for the hello-world simulation pipeline.

Provides the error hierarchy, centralized logging setup and small
validation helpers used before the model is loaded.
"""
import sys
import logging
from typing import Optional, Type
from pathlib import Path
from contextlib import contextmanager


class SimulationError(Exception):
    """Base exception for simulation-related errors."""
    pass


class ConfigurationError(SimulationError):
    """Raised when configuration is invalid."""
    pass


class FileOperationError(SimulationError):
    """Raised when file operations fail."""
    pass


class ModelLoadError(FileOperationError):
    """Raised when MuJoCo cannot compile a model file.

    The message is the diagnostic text reported by the library.
    """

    def __init__(self, diagnostic: str):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


class PhysicsEngineError(SimulationError):
    """Raised when the physics engine encounters an error."""
    pass


class ErrorHandler:
    """Centralized error handling for the simulation pipeline."""
    
    def __init__(self, log_file: Optional[Path] = None, verbose: bool = False):
        """Initialize the error handler.
        
        Args:
            log_file: Optional path to log file
            verbose: Log at INFO level instead of WARNING
        """
        self.verbose = verbose
        self._setup_logging(log_file)
    
    def _setup_logging(self, log_file: Optional[Path]) -> None:
        """Setup logging configuration."""
        handlers = [logging.StreamHandler(sys.stderr)]
        
        if log_file:
            handlers.append(logging.FileHandler(log_file, delay=True))
        
        logging.basicConfig(
            level=logging.INFO if self.verbose else logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers
        )
        
        self.logger = logging.getLogger('mjhello')
    
    def handle_error(self, error: SimulationError) -> int:
        """Log a recognized pipeline error.
        
        Args:
            error: The error that ended the run
            
        Returns:
            Exit status for the error (1 for every recognized error)
        """
        self.logger.error(f"{type(error).__name__}: {error}")
        return 1
    
    def log_info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)
    
    @contextmanager
    def error_context(self, operation: str, error_type: Type[SimulationError] = SimulationError):
        """Context manager for handling errors in a specific operation.
        
        Errors that are already a ``SimulationError`` pass through unchanged;
        anything else is wrapped in ``error_type``.
        
        Args:
            operation: Description of the operation being performed
            error_type: Type of error to raise if exception occurs
        """
        try:
            yield
        except SimulationError:
            raise
        except Exception as e:
            self.logger.error(f"Error during {operation}: {e}")
            raise error_type(f"Failed to {operation}: {e}") from e


def validate_positive_number(value: float, parameter_name: str) -> None:
    """Validate that a number is positive.
    
    Raises:
        ConfigurationError: If value is not positive
    """
    if value <= 0:
        raise ConfigurationError(f"{parameter_name} must be positive, got {value}")


def validate_non_negative_index(value: int, parameter_name: str) -> None:
    """Validate that an index is zero or greater.
    
    Raises:
        ConfigurationError: If value is negative
    """
    if value < 0:
        raise ConfigurationError(f"{parameter_name} must be non-negative, got {value}")
