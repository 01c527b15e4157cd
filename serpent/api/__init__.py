from fastapi import APIRouter
from .routes import snake

from ..config import get_settings

settings = get_settings()

api_router = APIRouter()

api_router.include_router(snake.router, prefix=settings.route_prefix, tags=["snake"])
