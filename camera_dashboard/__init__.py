"""Camera fleet admin dashboard: session-scoped camera state over a remote HTTP API."""

__version__ = "1.0.0"
