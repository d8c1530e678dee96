import argparse
import sys
from typing import NoReturn

from .config import SimulationDefaults


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors on stdout with exit status 1.
    
    A token starting with ``-`` that names no known option is taken as a
    positional path, so ``-scene.xml`` loads like any other model file.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)

    def parse_known_args(self, args=None, namespace=None):
        args = sys.argv[1:] if args is None else list(args)
        return super().parse_known_args(self._separate_dash_paths(args), namespace)

    def _separate_dash_paths(self, args: list[str]) -> list[str]:
        options, paths = [], []
        expects_value = False
        for i, token in enumerate(args):
            if token == "--":
                paths.extend(args[i + 1:])
                break
            if expects_value:
                options.append(token)
                expects_value = False
                continue
            if token.startswith("-") and token != "-" and self._match_option(token) is None:
                paths.append(token)
                continue
            options.append(token)
            action = self._match_option(token) if "=" not in token else None
            expects_value = action is not None and action.nargs != 0
        return options + ["--"] + paths if paths else options

    def _match_option(self, token: str) -> argparse.Action | None:
        name = token.split("=", 1)[0]
        if name in self._option_string_actions:
            return self._option_string_actions[name]
        # Unambiguous long-option prefixes, as argparse accepts them.
        if name.startswith("--"):
            matches = {action for option, action in self._option_string_actions.items()
                       if option.startswith(name)}
            if len(matches) == 1:
                return matches.pop()
        return None


def create_argument_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog=prog,
        usage=SimulationDefaults.USAGE,
        description="MuJoCo Hello World - load a model, step it and print a summary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_get_usage_examples()
    )
    
    parser.add_argument(
        "model",
        type=str,
        help="Path to an MJCF model file"
    )
    
    _add_simulation_arguments(parser)
    _add_output_arguments(parser)
    
    return parser


def _get_usage_examples() -> str:
    return """
Usage Examples:
    # Simulate the bundled scene for 10 seconds
    python3 run.py models/hello_world.xml
    
    # Shorter run, report the position of body 2
    python3 run.py my_model.xml --duration 2.5 --body 2
    
    # Log progress and print steps per second
    python3 run.py models/hello_world.xml --verbose
    
    # Model files whose names start with "-" load as-is (or after "--")
    python3 run.py -scene.xml
"""


def _add_simulation_arguments(parser: argparse.ArgumentParser) -> None:
    simulation_group = parser.add_argument_group('Simulation Options')
    
    simulation_group.add_argument(
        "--duration",
        type=float,
        default=SimulationDefaults.DURATION,
        help=f"Simulated time to run in seconds (default: {SimulationDefaults.DURATION})"
    )
    
    simulation_group.add_argument(
        "--body",
        type=int,
        default=SimulationDefaults.REPORT_BODY,
        help=f"Index of the body whose final position is printed (default: {SimulationDefaults.REPORT_BODY})"
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    output_group = parser.add_argument_group('Output Options')
    
    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    
    output_group.add_argument(
        "--log-file",
        type=str,
        help="Also write log records to this file"
    )
