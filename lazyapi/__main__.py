"""Module entrypoint for ``python -m lazyapi``."""

from .cli import main


if __name__ == "__main__":
    main()
