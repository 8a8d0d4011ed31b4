from fastapi import FastAPI

from .achievements import router as achievements_router
from .auth import router as auth_router
from .collection import router as collection_router
from .contact import router as contact_router
from .friends import router as friends_router
from .games import router as games_router
from .notifications import router as notifications_router
from .profiles import router as profiles_router
from .users import router as users_router
from .wishlist import router as wishlist_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(games_router)
    app.include_router(collection_router)
    app.include_router(wishlist_router)
    app.include_router(notifications_router)
    app.include_router(achievements_router)
    app.include_router(friends_router)
    app.include_router(profiles_router)
    app.include_router(contact_router)
