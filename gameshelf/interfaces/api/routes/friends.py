"""Rutas para administrar amistades entre coleccionistas."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.friends import (
    add_friend_by_code,
    list_friends,
    remove_friend,
)
from gameshelf.domain.entities import User
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.dependencies import get_current_active_user
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import (
    AddFriendByCodeRequest,
    AddFriendRead,
    FriendListRead,
    FriendRead,
    RemoveFriendRequest,
    SuccessResponse,
)

router = APIRouter(prefix="/friends", tags=["friends"])


def _friend_to_schema(user: User) -> FriendRead:
    return FriendRead(
        id=user.id,
        username=user.username,
        full_name=user.full_name,
        avatar_url=user.avatar_url,
        friend_code=user.friend_code,
    )


@router.get("", response_model=FriendListRead)
def read_friends(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    friends = [_friend_to_schema(user) for user in list_friends(db, user_id=current_user.id)]
    return FriendListRead(friends=friends, count=len(friends))


@router.post("/add-by-code", response_model=AddFriendRead)
def add_by_code(
    payload: AddFriendByCodeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        friend = add_friend_by_code(db, user_id=current_user.id, code=payload.code)
    except ValueError as exc:
        raise_http_error(exc)
    return AddFriendRead(friend=_friend_to_schema(friend))


@router.post("/remove", response_model=SuccessResponse)
def remove(
    payload: RemoveFriendRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        remove_friend(db, user_id=current_user.id, friend_id=payload.friend_id)
    except ValueError as exc:
        raise_http_error(exc)
    return SuccessResponse()
