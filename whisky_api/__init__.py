"""
Top‑level package for the Whisky API.

The package is split into the ASGI application under ``app`` and a
small HTTP client in ``client`` that talks to a running instance.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
