"""Command-line pipeline: argument parsing, configuration, running and reporting."""
