"""Allow running the CLI with ``python -m tomato_cli``."""

from tomato_cli.main import main

if __name__ == "__main__":
    main()
