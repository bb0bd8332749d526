"""Package entry point for ``python -m argscan``."""

from argscan.cli import main

if __name__ == "__main__":
    main()
