"""Rutas para compartir listas de deseos y registrar intenciones de compra."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gameshelf.application.use_cases.wishlist import (
    get_or_create_share,
    get_shared_wishlist,
    rotate_share_token,
    toggle_buy,
    toggle_share_active,
)
from gameshelf.config import get_settings
from gameshelf.domain.entities import User, WishlistShare
from gameshelf.infrastructure.database import get_db
from gameshelf.interfaces.api.dependencies import get_current_active_user, get_optional_user
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import (
    SharedGameRead,
    SharedWishlistItemRead,
    SharedWishlistRead,
    SuccessResponse,
    WishlistBuyRequest,
    WishlistOwnerRead,
    WishlistShareRead,
    WishlistShareToggleRead,
    WishlistShareToggleRequest,
)

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


def _share_to_schema(share: WishlistShare) -> WishlistShareRead:
    return WishlistShareRead(
        token=share.token,
        share_url=get_settings().share_url(share.token),
        is_active=share.is_active,
    )


@router.post("/buy", response_model=SuccessResponse)
def set_purchase_intent(
    payload: WishlistBuyRequest,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    """Marca un juego de la lista de deseos como "lo compro" o retira esa intención.

    Los visitantes envían el token compartido; el propietario puede omitirlo
    y autenticarse en su lugar.
    """

    try:
        toggle_buy(
            db,
            item_id=payload.item_id,
            buy=payload.buy,
            token=payload.token,
            user_id=current_user.id if current_user and payload.token is None else None,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return SuccessResponse()


@router.get("/share", response_model=WishlistShareRead)
def read_share(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return _share_to_schema(get_or_create_share(db, user_id=current_user.id))


@router.post("/share", response_model=WishlistShareRead)
def rotate_share(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Genera un enlace nuevo; el anterior deja de funcionar."""

    return _share_to_schema(rotate_share_token(db, user_id=current_user.id))


@router.post("/share/toggle", response_model=WishlistShareToggleRead)
def toggle_share(
    payload: WishlistShareToggleRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Activa o desactiva el enlace conservando su URL."""

    share = toggle_share_active(db, user_id=current_user.id, is_active=payload.is_active)
    if share is None:
        return WishlistShareToggleRead(is_active=False)
    return WishlistShareToggleRead(
        is_active=share.is_active,
        token=share.token,
        share_url=get_settings().share_url(share.token),
    )


@router.get("/{token}", response_model=SharedWishlistRead)
def read_shared_wishlist(token: str, db: Session = Depends(get_db)):
    """Vista pública y de solo lectura de la lista de deseos asociada a ``token``."""

    try:
        wishlist = get_shared_wishlist(db, token=token)
    except ValueError as exc:
        raise_http_error(exc)

    items = [
        SharedWishlistItemRead(
            item_id=item.id,
            buy=bool(item.buy),
            game=SharedGameRead(
                id=item.game.id,
                title=item.game.title,
                cover_url=item.game.cover_url,
                console_name=item.game.console_name,
            ),
        )
        for item in wishlist.items
        if item.game is not None
    ]
    return SharedWishlistRead(
        owner=WishlistOwnerRead(
            username=wishlist.owner.username,
            full_name=wishlist.owner.full_name,
        ),
        items=items,
    )
