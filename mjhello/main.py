#!/usr/bin/env python3
"""Main entry point: load an MJCF model, step it and print a summary."""
import sys
from .pipeline.cli_parser import create_argument_parser
from .pipeline.config import OutputConfig, SimulationConfig
from .pipeline.error_handler import ErrorHandler, ModelLoadError, PhysicsEngineError, SimulationError
from .pipeline.output_handler import SimulationOutputHandler
from .pipeline.run_simulation import SimulationRunner

def main(argv: list[str] | None = None) -> int:
  # Usage errors exit with status 1 from inside parse_args.
  args = create_argument_parser().parse_args(argv)

  output_config = OutputConfig.from_args(args)
  error_handler = ErrorHandler(log_file=output_config.log_file, verbose=output_config.verbose)
  output = SimulationOutputHandler(verbose=output_config.verbose)

  try:
    config = SimulationConfig.from_args(args)
    error_handler.log_info(f"Simulating {config.model_path} for {config.duration:g}s")
    with error_handler.error_context("run simulation", PhysicsEngineError):
      SimulationRunner(config, output).run()
  except ModelLoadError as e:
    output.print_load_error(e.diagnostic)
    return error_handler.handle_error(e)
  except SimulationError as e:
    output.print_error(str(e))
    return error_handler.handle_error(e)

  return 0

if __name__ == "__main__":
  sys.exit(main())
