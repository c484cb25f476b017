# /app/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# --- Application-specific Imports ---
from .core.config import CORS_ORIGINS
from .core.errors import register_exception_handlers
from .core.logging_config import configure_logging
from .db.database import init_db
from .routers import (
    batches_router,
    classes_router,
    course_allocations_router,
    courses_router,
    dashboard_router,
    departments_router,
    faculty_router,
    students_router,
)

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs ONCE when the application starts up.
    configure_logging()
    init_db()
    logger.info("Database tables ready")
    yield
    # Runs ONCE when the application shuts down.
    logger.info("Shutting down")


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="College Administration API",
    description="Departments, course catalog, faculty, classes and student rosters.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(departments_router.router, prefix="/api/departments", tags=["Departments"])
app.include_router(batches_router.router, prefix="/api/batches", tags=["Batches"])
app.include_router(courses_router.router, prefix="/api/courses", tags=["Courses"])
app.include_router(faculty_router.router, prefix="/api/faculty", tags=["Faculty"])
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(course_allocations_router.router, prefix="/api/course-allocations", tags=["Course Allocations"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "College Administration API is running!", "version": app.version}
