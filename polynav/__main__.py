"""Module entrypoint for ``python -m polynav``."""

from .cli import main


if __name__ == "__main__":
    main()
