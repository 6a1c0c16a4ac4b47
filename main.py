from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.sample_data import seed_sample_data
from app.core.storage import MemStorage
from app.api.routes import employees, time_entries, schedules, attendance, analytics
from app.services.export_service import MockSpreadsheetExporter, SpreadsheetExporter
import logging

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(
    storage: Optional[MemStorage] = None,
    spreadsheet_exporter: Optional[SpreadsheetExporter] = None,
) -> FastAPI:
    """Build the API around an explicitly owned store."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Employee records, shift scheduling, time clock and attendance analytics"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    if storage is None:
        storage = MemStorage()
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(storage)

    app.state.storage = storage
    app.state.spreadsheet_exporter = (
        spreadsheet_exporter or MockSpreadsheetExporter(settings.SPREADSHEET_BASE_URL)
    )

    # Include routers
    app.include_router(employees.router, prefix="/api")
    app.include_router(time_entries.router, prefix="/api")
    app.include_router(schedules.router, prefix="/api")
    app.include_router(attendance.router, prefix="/api")
    app.include_router(analytics.router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "employees": len(app.state.storage.get_employees()),
            "version": settings.APP_VERSION
        }

    logger.info(f"✅ {settings.APP_NAME} {settings.APP_VERSION} ready")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
