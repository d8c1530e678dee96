#!/usr/bin/env python3
"""MuJoCo hello-world runner.

Pipeline: parse arguments -> load model -> step to the target time -> print summary

Usage:
  python3 run.py models/hello_world.xml
  python3 run.py models/hello_world.xml --duration 2 --body 1 --verbose
"""
import sys

from mjhello.main import main

if __name__ == "__main__":
    sys.exit(main())
