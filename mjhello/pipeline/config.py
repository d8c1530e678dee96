"""Configuration classes for the hello-world simulation pipeline."""
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .error_handler import (
    ConfigurationError,
    validate_non_negative_index,
    validate_positive_number,
)


@dataclass(frozen=True)
class SimulationDefaults:
    """Defaults for values the command line may override."""
    DURATION: float = 10.0
    REPORT_BODY: int = 1
    USAGE: str = "%(prog)s <model.xml> [--duration SECONDS] [--body INDEX] [-v]"


@dataclass
class SimulationConfig:
    """Configuration for one simulation run."""
    model_path: Path
    duration: float = SimulationDefaults.DURATION
    report_body: int = SimulationDefaults.REPORT_BODY
    
    def __post_init__(self):
        self.model_path = Path(self.model_path)
        if math.isnan(self.duration) or math.isinf(self.duration):
            raise ConfigurationError(f"duration must be finite, got {self.duration}")
        validate_positive_number(self.duration, "duration")
        validate_non_negative_index(self.report_body, "body")
    
    @classmethod
    def from_args(cls, args) -> 'SimulationConfig':
        """Create config from command-line arguments."""
        return cls(
            model_path=Path(args.model),
            duration=args.duration,
            report_body=args.body
        )


@dataclass
class OutputConfig:
    """Configuration for console and log output."""
    verbose: bool = False
    log_file: Optional[Path] = None
    
    @classmethod
    def from_args(cls, args) -> 'OutputConfig':
        """Create config from command-line arguments."""
        return cls(
            verbose=args.verbose,
            log_file=Path(args.log_file) if args.log_file else None
        )
