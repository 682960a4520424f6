"""Allow ``python -m buglab``."""

from buglab.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
