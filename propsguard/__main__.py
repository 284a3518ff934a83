"""Allow `python -m propsguard`."""

from propsguard.cli import main

if __name__ == "__main__":
    main()
