from fastapi import APIRouter

from api.routes.admin import router as admin_router
from api.routes.home import router as home_router
from api.routes.minerals import router as minerals_router
from api.routes.pages import router as pages_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(home_router)
api_router.include_router(pages_router)
api_router.include_router(minerals_router)
api_router.include_router(admin_router)
