"""Allow ``python -m gitpulls``."""

from gitpulls.cli.main import app

if __name__ == "__main__":
    app(prog_name="gitpulls")
