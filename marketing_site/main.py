#run it with uvicorn marketing_site.main:app --reload
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from marketing_site.api.v1.api_router import api_router
from marketing_site.core.config import Settings, get_settings
from dotenv import load_dotenv
import logging

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

app = FastAPI(title="Marketing Site Backend", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/api/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports whether the email provider is configured without exposing the key.
    """
    return {
        "status": "ok",
        "services": {
            "email": settings.email_service_configured,
        },
    }
