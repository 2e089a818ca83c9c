"""
Health Check Routes
Service health monitoring endpoints
"""

from fastapi import APIRouter
from datetime import datetime
import logging

from app.utils.config import get_resend_config, get_app_config

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def health_check():
    """Basic health check"""
    app_config = get_app_config()
    return {
        "status": "healthy",
        "service": app_config.service_name,
        "timestamp": datetime.utcnow().isoformat(),
        "version": app_config.service_version
    }


@router.get("/detailed")
async def detailed_health_check():
    """Detailed health check including email API configuration"""
    app_config = get_app_config()
    health_status = {
        "status": "healthy",
        "service": app_config.service_name,
        "timestamp": datetime.utcnow().isoformat(),
        "version": app_config.service_version,
        "components": {}
    }

    try:
        health_status["components"]["email"] = check_configuration()
    except Exception as e:
        logger.error(f"Configuration check failed: {e}")
        health_status["components"]["email"] = {
            "status": "unhealthy",
            "error": str(e)
        }
        health_status["status"] = "degraded"

    return health_status


def check_configuration():
    """Check email API configuration"""
    config = get_resend_config()

    if not config.is_configured():
        raise Exception("Missing required environment variables: ['RESEND_API_KEY']")

    return {
        "status": "healthy",
        "config": {
            "RESEND_API_KEY": "***",
            "RESEND_API_URL": config.resend_api_url,
            "DEFAULT_FROM_EMAIL": config.default_from_email,
            "ADMIN_EMAIL": config.admin_email
        }
    }
