"""
The whisky record.

A plain data holder.  The store keys records by ``id``; ``name`` and
``origin`` are free‑form text and may be ``None`` after an update that
omits them.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Whisky:
    id: int
    name: Optional[str] = None
    origin: Optional[str] = None

    def copy(self) -> "Whisky":
        """Return a detached copy safe to hand out to callers."""
        return replace(self)
