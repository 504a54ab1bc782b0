"""Allow running walkctl as ``python -m walkctl``."""

from walkctl.cli.main import app

if __name__ == "__main__":
    app()
