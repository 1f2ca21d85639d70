"""Allow `python -m shellsweep`."""

from shellsweep.cli import main

if __name__ == "__main__":
    main()
