"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from .config import settings
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .patients.router import router as patients_router
from .doctors.router import router as doctors_router
from .appointments.router import router as appointments_router
from .medical_records.router import router as records_router
from .admin.router import router as admin_router
from .dashboard.router import router as dashboard_router
from .ai.router import router as ai_router

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

logger.info(f"🚀 Starting Hospital Dashboard API (data directory: {settings.data_dir})...")

# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    description="API for the hospital administration dashboard",
    version=settings.app_version
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware
setup_middlewares(app)

# Include routers
prefix = settings.api_prefix
app.include_router(patients_router, prefix=f"{prefix}/patients", tags=["Patients"])
app.include_router(doctors_router, prefix=f"{prefix}/doctors", tags=["Doctors"])
app.include_router(appointments_router, prefix=f"{prefix}/appointments", tags=["Appointments"])
app.include_router(records_router, prefix=f"{prefix}/records", tags=["Medical Records"])
app.include_router(admin_router, prefix=f"{prefix}/admin", tags=["Admin"])
app.include_router(dashboard_router, prefix=f"{prefix}/dashboard", tags=["Dashboard"])
app.include_router(ai_router, prefix=f"{prefix}/ai", tags=["AI"])

# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint for API health check.

    Returns:
        dict: Simple welcome message
    """
    return {"message": "Welcome to Hospital Dashboard API", "version": settings.app_version}

# Health check endpoint
@app.get("/health")
async def health_check():
    """
    Liveness check for monitoring.

    Does not touch storage; use the admin health endpoint for that.

    Returns:
        dict: Health status information
    """
    return {"status": "healthy"}
