"""Rutas para registrar usuarios y administrar su perfil."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.users import create_user as create_user_uc
from gameshelf.application.use_cases.users import update_profile
from gameshelf.domain.entities import User
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.dependencies import get_current_active_user
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Crea una cuenta nueva; no requiere autenticación."""

    try:
        user = create_user_uc(
            db,
            username=user_in.username,
            full_name=user_in.full_name,
            email=user_in.email,
            password=user_in.password,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return UserRead.model_validate(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    return UserRead.model_validate(current_user)


@router.patch("/me", response_model=UserRead)
def update_current_user(
    changes: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Actualiza el perfil del usuario autenticado, incluida su visibilidad pública."""

    try:
        user = update_profile(
            db,
            user_id=current_user.id,
            full_name=changes.full_name,
            avatar_url=changes.avatar_url,
            is_public=changes.is_public,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return UserRead.model_validate(user)
