"""goproj - scaffold Go projects in one step."""

__version__ = "0.3.0"
