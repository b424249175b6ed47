"""Allow ``python -m tree_me``."""

from .cli import main

if __name__ == "__main__":
    main()
