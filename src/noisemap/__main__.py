"""CLI entry point for python -m noisemap."""

from .cli import main

if __name__ == "__main__":
    main()
