from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from barcode_inventory.config import get_settings
from barcode_inventory.database import engine, Base, SessionLocal
from barcode_inventory.models import category, product, user  # noqa: F401  (register tables)
from barcode_inventory.api import auth, products, categories, analytics, proxy, health
from barcode_inventory.services.category_service import CategoryService
from barcode_inventory.services.exceptions import ServiceError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up application...")

    # Create database tables
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")

    db = SessionLocal()
    try:
        CategoryService(db).seed_defaults()
    finally:
        db.close()

    yield

    # Shutdown
    logger.info("Shutting down application...")
    proxy.close_lookup_service()


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Backend for a barcode-based inventory tracker:

    - **Auth**: Registration and login with 7-day bearer tokens
    - **Products**: Add scanned products, list, search and move them between categories
    - **Categories**: Named columns of the inventory board; deletion is blocked while in use
    - **Analytics**: Per-category counts and recently added products
    - **Proxy**: Barcode lookup against an external product metadata service

    All endpoints except `/api/auth/*` and `/health` require an
    `Authorization: Bearer <token>` header.
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Render service-layer errors with their mapped status code."""
    content = {"detail": exc.message}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed or missing fields as a single 400 message."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path"))
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": ", ".join(messages)}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    detail = str(exc) if settings.is_development else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": detail}
    )


# Include API routers
app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(products.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(analytics.router, prefix="/api")
app.include_router(proxy.router, prefix="/api")


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health"
    }
