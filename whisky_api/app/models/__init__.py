"""In‑memory domain records held by the store."""

from .whisky import Whisky  # noqa: F401
