from stringer.cli.main import app

__all__ = ["app"]
