"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The in‑memory whisky store lives in ``services``, request and response
shapes in ``schemas`` and the HTTP routes in ``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
