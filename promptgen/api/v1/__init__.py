"""API v1 routers"""

from fastapi import APIRouter

from promptgen.api.generate import router as generate_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(generate_router)
