from fastapi import APIRouter

from ses_mock.presentation.routers.v2.outbound_emails import router as outbound_emails_router
from ses_mock.presentation.routes.health import router as health_router

api = APIRouter()

# Add all v2 routers here
routers = (outbound_emails_router,)
for router in routers:
    api.include_router(router, prefix="/v2")

api.include_router(health_router)
