"""Allow running nvmprune as ``python -m nvmprune``."""

from nvmprune.cli.main import app

if __name__ == "__main__":
    app()
