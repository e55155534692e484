"""Allow running findr as ``python -m findr``."""

from findr.cli.main import app

if __name__ == "__main__":
    app()
