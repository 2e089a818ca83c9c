"""
Notification Service
Report notification emails for MercaTech
"""

from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
import logging
import os
from contextlib import asynccontextmanager

from shared.utils.logger import init_logging
from app.utils.config import get_app_config, validate_configuration

# Configure logging
init_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("🚀 Notification Service starting up...")

    validate_configuration()

    yield

    logger.info("📧 Notification Service shutting down...")


app_config = get_app_config()

# Create FastAPI app
app = FastAPI(
    title="Notification Service",
    description="Report notification emails for the MercaTech marketplace",
    version=app_config.service_version,
    lifespan=lifespan
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Render framework errors with the same body shape as the handler"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail}
    )


# Import and include routers
from app.routes import health, reports

app.include_router(health.router, prefix="/health", tags=["Health"])
app.include_router(reports.router, tags=["Reports"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "5000")),
        reload=True
    )
