"""
Whisky endpoints.

These routes expose the CRUD operations of ``WhiskyStore``.  Store
failures are turned into ``HTTPException`` with the status the error
carries; the application renders every error with an empty body.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from whisky_api.app.api.deps import get_store
from whisky_api.app.core.errors import WhiskyStoreError
from whisky_api.app.schemas.whisky import WhiskyCreate, WhiskyRead, WhiskyUpdate
from whisky_api.app.services.whisky_store import WhiskyStore

router = APIRouter()


def _http_error(exc: WhiskyStoreError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


@router.get("", response_model=List[WhiskyRead])
async def list_whiskies(store: WhiskyStore = Depends(get_store)) -> List[WhiskyRead]:
    """Return every whisky in insertion order."""
    return [WhiskyRead.model_validate(w) for w in store.list_whiskies()]


@router.post("", response_model=WhiskyRead, status_code=status.HTTP_201_CREATED)
async def create_whisky(
    whisky: WhiskyCreate,
    store: WhiskyStore = Depends(get_store),
) -> WhiskyRead:
    """Store a whisky under the id given in the body.

    A whisky already stored under that id is replaced.
    """
    try:
        created = store.create_whisky(whisky)
    except WhiskyStoreError as e:
        raise _http_error(e) from e
    return WhiskyRead.model_validate(created)


@router.get("/{whisky_id}", response_model=WhiskyRead)
async def get_whisky(whisky_id: str, store: WhiskyStore = Depends(get_store)) -> WhiskyRead:
    """Retrieve a single whisky.  Raises 404 if it does not exist."""
    try:
        return WhiskyRead.model_validate(store.get_whisky(whisky_id))
    except WhiskyStoreError as e:
        raise _http_error(e) from e


@router.put("/{whisky_id}", response_model=WhiskyRead)
async def update_whisky(
    whisky_id: str,
    updates: WhiskyUpdate,
    store: WhiskyStore = Depends(get_store),
) -> WhiskyRead:
    """Replace ``name`` and ``origin`` of an existing whisky.

    Fields missing from the body are cleared, not kept.
    """
    try:
        return WhiskyRead.model_validate(store.update_whisky(whisky_id, updates))
    except WhiskyStoreError as e:
        raise _http_error(e) from e


@router.delete("/{whisky_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_whisky(whisky_id: str, store: WhiskyStore = Depends(get_store)) -> None:
    """Delete a whisky.  Unknown ids are accepted silently."""
    try:
        store.delete_whisky(whisky_id)
    except WhiskyStoreError as e:
        raise _http_error(e) from e
    return None
