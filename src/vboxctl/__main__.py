"""Allow running vboxctl as ``python -m vboxctl``."""

from vboxctl.cli import main

if __name__ == "__main__":
    main()
