"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in‑memory records in ``models`` so the
API representation can evolve independently of the store.
"""
