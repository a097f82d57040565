"""Module entry point for running the CLI with ``python -m gofsim_cli``."""
import sys

from .main import main


if __name__ == "__main__":
    sys.exit(main())
