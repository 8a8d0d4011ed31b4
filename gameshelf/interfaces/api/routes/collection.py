"""Rutas para administrar la colección y la lista de deseos del usuario."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.collection import (
    add_to_collection,
    list_collection,
    remove_from_collection,
    update_collection_entry,
)
from gameshelf.domain.entities import User
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.dependencies import get_current_active_user
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import (
    CollectionEntryCreate,
    CollectionEntryRead,
    CollectionEntryUpdate,
)

router = APIRouter(prefix="/collection", tags=["collection"])


@router.get("", response_model=list[CollectionEntryRead])
def list_entries(
    status_filter: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        entries = list_collection(db, user_id=current_user.id, status=status_filter)
    except ValueError as exc:
        raise_http_error(exc)
    return [CollectionEntryRead.model_validate(entry) for entry in entries]


@router.post("", response_model=CollectionEntryRead, status_code=status.HTTP_201_CREATED)
def add_entry(
    entry_in: CollectionEntryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        entry = add_to_collection(
            db,
            user_id=current_user.id,
            game_id=entry_in.game_id,
            status=entry_in.status,
            notes=entry_in.notes,
            rating=entry_in.rating,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return CollectionEntryRead.model_validate(entry)


@router.patch("/{entry_id}", response_model=CollectionEntryRead)
def update_entry(
    entry_id: int,
    entry_in: CollectionEntryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Edita una entrada; al salir de la lista de deseos se retira la intención de compra."""

    try:
        entry = update_collection_entry(
            db,
            user_id=current_user.id,
            entry_id=entry_id,
            status=entry_in.status,
            notes=entry_in.notes,
            rating=entry_in.rating,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return CollectionEntryRead.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        remove_from_collection(db, user_id=current_user.id, entry_id=entry_id)
    except ValueError as exc:
        raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
