"""Entry point for `python -m fileops`."""

from fileops.app import main

if __name__ == "__main__":
    raise SystemExit(main())
