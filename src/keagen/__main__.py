"""Run the keagen command-line interface with python -m keagen."""

from .cli import main

main()
