"""
Endpoint subpackage for API v1.

Each module defines an APIRouter that ``router.py`` aggregates.
"""
