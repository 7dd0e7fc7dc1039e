"""
In‑memory whisky store.

``WhiskyStore`` owns every ``Whisky`` record in a dict keyed by id, so
listing follows insertion order.  Re‑creating an existing id replaces
the record but keeps its original position, exactly as a repeated key
assignment does.  One lock serialises all operations, which makes the
store safe to share between uvicorn's event loop and threadpool
workers.  Callers only ever receive copies; changes go through
``update_whisky``.
"""

import logging
import re
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from ..core.errors import InvalidIdentifier, MalformedPayload, NotFound
from ..models.whisky import Whisky
from ..schemas.whisky import ID_MAX, ID_MIN, WhiskyCreate, WhiskyUpdate
from .id_allocator import IdentifierAllocator


logger = logging.getLogger(__name__)

Identifier = Union[int, str]

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

SEED_WHISKIES = (
    ("Bowmore 15 Years Laimrig", "Scotland, Islay"),
    ("Talisker 57° North", "Scotland, Island"),
)


def parse_identifier(raw: Optional[Identifier]) -> int:
    """Convert a path parameter into a whisky id or raise ``InvalidIdentifier``."""
    if isinstance(raw, bool):
        raise InvalidIdentifier(raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _ID_PATTERN.fullmatch(raw):
        value = int(raw)
    else:
        raise InvalidIdentifier(raw)
    if not ID_MIN <= value <= ID_MAX:
        raise InvalidIdentifier(raw)
    return value


def _validate(schema: type, payload: Any) -> Any:
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    if not isinstance(payload, Mapping):
        raise MalformedPayload(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise MalformedPayload(str(exc)) from exc


class WhiskyStore:
    """Ordered collection of whiskies with CRUD operations."""

    def __init__(self) -> None:
        self._whiskies: Dict[int, Whisky] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._whiskies)

    def __contains__(self, whisky_id: object) -> bool:
        with self._lock:
            return whisky_id in self._whiskies

    def seed_defaults(self, allocator: Optional[IdentifierAllocator] = None) -> List[Whisky]:
        """Insert the startup records, numbered by ``allocator``."""
        allocator = allocator or IdentifierAllocator()
        seeded = []
        for name, origin in SEED_WHISKIES:
            whisky = Whisky(id=allocator.next_id(), name=name, origin=origin)
            with self._lock:
                self._whiskies[whisky.id] = whisky
            seeded.append(whisky.copy())
        logger.info("Seeded %d whiskies", len(seeded))
        return seeded

    def list_whiskies(self) -> List[Whisky]:
        with self._lock:
            return [whisky.copy() for whisky in self._whiskies.values()]

    def create_whisky(self, payload: Union[WhiskyCreate, Mapping[str, Any]]) -> Whisky:
        """Store a whisky under the id the caller chose.

        An existing whisky with the same id is silently replaced.
        Raises ``MalformedPayload`` if ``payload`` has no usable id.
        """
        data = _validate(WhiskyCreate, payload)
        whisky = Whisky(id=data.id, name=data.name, origin=data.origin)
        with self._lock:
            replaced = whisky.id in self._whiskies
            self._whiskies[whisky.id] = whisky
        if replaced:
            logger.info("Replaced whisky %s with '%s'", whisky.id, whisky.name)
        else:
            logger.info("Created whisky %s '%s'", whisky.id, whisky.name)
        return whisky.copy()

    def get_whisky(self, whisky_id: Identifier) -> Whisky:
        key = parse_identifier(whisky_id)
        with self._lock:
            whisky = self._whiskies.get(key)
            if whisky is None:
                logger.debug("Whisky %s not found", key)
                raise NotFound(key)
            return whisky.copy()

    def update_whisky(
        self,
        whisky_id: Identifier,
        payload: Union[WhiskyUpdate, Mapping[str, Any]],
    ) -> Whisky:
        """Overwrite ``name`` and ``origin`` of an existing whisky.

        Both fields are assigned from the payload even when absent, so
        an omitted field becomes ``None``.  The id never changes.
        """
        key = parse_identifier(whisky_id)
        if payload is None:
            raise MalformedPayload("Update requires a JSON object")
        data = _validate(WhiskyUpdate, payload)
        with self._lock:
            whisky = self._whiskies.get(key)
            if whisky is None:
                raise NotFound(key)
            whisky.name = data.name
            whisky.origin = data.origin
            result = whisky.copy()
        logger.info("Updated whisky %s", key)
        return result

    def delete_whisky(self, whisky_id: Identifier) -> None:
        """Remove a whisky.  Deleting an unknown id is not an error."""
        key = parse_identifier(whisky_id)
        with self._lock:
            removed = self._whiskies.pop(key, None)
        if removed is not None:
            logger.info("Deleted whisky %s", key)
        else:
            logger.debug("Delete of unknown whisky %s ignored", key)


def create_store(seed: bool = True) -> WhiskyStore:
    """Build a store, optionally holding the two startup whiskies."""
    store = WhiskyStore()
    if seed:
        store.seed_defaults(IdentifierAllocator())
    return store
