from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse, JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import uvicorn
import logging
import sys

from lifetrack.core.config import settings
from lifetrack.db.base import Base
from lifetrack.db.session import engine
from lifetrack.middleware.performance import PerformanceMiddleware
from lifetrack import models  # noqa: F401  registers tables on Base.metadata
from lifetrack.api import deps

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"Starting up {settings.PROJECT_NAME} backend...")

    # Check database tables
    try:
        existing_tables = inspect(engine).get_table_names()
        required_tables = [table.name for table in Base.metadata.tables.values()]
        missing_tables = [table for table in required_tables if table not in existing_tables]

        if missing_tables:
            logger.warning(f"Missing database tables: {missing_tables}")
            logger.warning("Run `alembic upgrade head` before serving requests")
        else:
            logger.info("All required database tables exist")
    except Exception as e:
        logger.warning(f"Could not check database tables: {e}")

    yield

    logger.info(f"{settings.PROJECT_NAME} backend shutdown complete")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Personal activity, nutrition and lifestyle tracker with a daily activity rating",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    # CORS Middleware - Environment-specific origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    logger.info(f"CORS configured for {settings.ENVIRONMENT.value} environment with origins: {settings.allowed_cors_origins}")

    app.add_middleware(PerformanceMiddleware)

    from lifetrack.api.v1.api import api_router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app

# Create the FastAPI app instance
app = create_application()

@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint that redirects to API documentation"""
    return RedirectResponse(url=f"{settings.API_PREFIX}/docs")

@app.get("/health", tags=["Health Check"])
def health_check(db: Session = Depends(deps.get_db)):
    """Health check endpoint"""
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "unhealthy"

    return {
        "status": "healthy",
        "version": settings.VERSION,
        "project": settings.PROJECT_NAME,
        "database": db_status,
    }

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Global HTTP exception handler"""
    logger.error(f"HTTP {exc.status_code}: {exc.detail} - {request.url}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.detail,
            "status_code": exc.status_code
        },
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema violations keep the error envelope and list the offending fields"""
    errors = exc.errors()
    logger.warning(f"Validation failed: {len(errors)} error(s) - {request.url}")
    return JSONResponse(
        status_code=422,
        content={
            "error": True,
            "message": "Validation error",
            "status_code": 422,
            "details": jsonable_encoder(errors),
        }
    )

@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures surface as a generic server error"""
    logger.error(f"Database error: {exc} - {request.url}")
    return JSONResponse(
        status_code=500,
        content={
            "error": True,
            "message": "Server error",
            "status_code": 500
        }
    )

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions"""
    logger.error(f"Unhandled exception: {exc} - {request.url}")
    return JSONResponse(
        status_code=500,
        content={
            "error": True,
            "message": "Internal server error",
            "status_code": 500
        }
    )

if __name__ == "__main__":
    uvicorn.run(
        "lifetrack.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )
