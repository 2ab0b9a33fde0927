from fastapi import APIRouter

from app.api.routes import echo, health, version

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(version.router, tags=["version"])
# Catch-all; must stay last so the fixed paths above win.
router.include_router(echo.router, tags=["echo"])
