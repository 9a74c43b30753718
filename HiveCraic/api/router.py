from fastapi import APIRouter
from .auth import router as auth_router
from .users import router as users_router
from .apiaries import router as apiaries_router
from .hives import router as hives_router
from .queens import router as queens_router
from .inspections import router as inspections_router
from .feedings import router as feedings_router
from .harvests import router as harvests_router
from .varroa import router as varroa_router
from .batches import router as batches_router
from .support import router as support_router
from .dropdowns import router as dropdowns_router
from .dashboard import router as dashboard_router
from .tools import router as tools_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(dashboard_router)
api_router.include_router(apiaries_router)
api_router.include_router(hives_router)
api_router.include_router(queens_router)
api_router.include_router(inspections_router)
api_router.include_router(feedings_router)
api_router.include_router(harvests_router)
api_router.include_router(varroa_router)
api_router.include_router(batches_router)
api_router.include_router(support_router)
api_router.include_router(dropdowns_router)
api_router.include_router(tools_router)
