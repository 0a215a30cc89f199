"""Report Card -- configuration-driven project health checks."""

__version__ = "0.1.0"
