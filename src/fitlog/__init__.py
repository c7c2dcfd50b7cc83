"""fitlog: personal workout log and statistics."""

__version__ = "0.1.0"
