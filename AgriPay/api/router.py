from fastapi import APIRouter
from .auth import router as auth_router
from .users import router as users_router
from .employees import router as employees_router
from .entrepreneurs import router as entrepreneurs_router
from .harvests import router as harvests_router
from .work_tasks import router as work_tasks_router
from .advances import router as advances_router
from .rain_events import router as rain_events_router
from .market_settings import router as settings_router
from .dashboard import router as dashboard_router
from .journal import router as journal_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(employees_router)
api_router.include_router(entrepreneurs_router)
api_router.include_router(harvests_router)
api_router.include_router(work_tasks_router)
api_router.include_router(advances_router)
api_router.include_router(rain_events_router)
api_router.include_router(settings_router)
api_router.include_router(dashboard_router)
api_router.include_router(journal_router)
