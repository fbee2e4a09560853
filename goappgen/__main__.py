"""Allow ``python -m goappgen``."""

from goappgen.cli import main

if __name__ == "__main__":
    main()
