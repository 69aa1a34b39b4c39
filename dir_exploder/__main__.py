"""Entry point for ``python -m dir_exploder``."""

from .cli import main

if __name__ == "__main__":
    main()
