from fastapi import APIRouter, FastAPI

from .match import router as match_router, scaffold_router as match_scaffold_router
from .profile import router as profile_router, scaffold_router as profile_scaffold_router


def include_modular_routers(app: FastAPI) -> None:
    app.include_router(match_router, prefix="/api", tags=["matching"])
    app.include_router(profile_router, prefix="/api", tags=["profile"])

    app.include_router(match_scaffold_router, prefix="/_scaffold/match", tags=["scaffold-match"])
    app.include_router(profile_scaffold_router, prefix="/_scaffold/profile", tags=["scaffold-profile"])


__all__ = ["include_modular_routers", "APIRouter"]
