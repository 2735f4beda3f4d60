"""Top-level package for github-activity."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "exceptions",
    "github",
    "models",
    "render",
    "server",
    "widget",
]
