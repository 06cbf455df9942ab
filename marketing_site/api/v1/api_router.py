from fastapi import APIRouter
from marketing_site.api.v1.endpoints import contact, footer

api_router = APIRouter(prefix="/v1")

api_router.include_router(contact.router, tags=["Contact"])
api_router.include_router(footer.router, tags=["Footer"])
