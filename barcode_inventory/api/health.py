from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
import logging

from barcode_inventory.database import engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    summary="Health check",
    description="Basic liveness endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "OK", "message": "Barcode Inventory Management API is running"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check that the database accepts connections."
)
def readiness_check():
    """
    Readiness check for dependencies.

    Returns status of:
    - Database connection
    """
    checks = {"database": False}

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            checks["database"] = True
    except Exception as e:
        logger.error(f"Database readiness check failed: {e}")
        checks["database_error"] = str(e)

    ready = checks["database"]
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"status": "ready" if ready else "not_ready", "checks": checks}
    )
