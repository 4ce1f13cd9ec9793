# eportal/main.py

import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from eportal.core.config import settings
from eportal.core.database import init_db, test_connection
from eportal.core.rate_limiter import limiter
from eportal.core.seeding_logic import seed_all

# Routers
from eportal.api.endpoints import (
    academic,
    account,
    auth as auth_router,
    communication,
    courses,
    dashboard as dashboard_router,
    examinations,
    finance,
    governance,
    hostels,
    logs as logs_router,
    metrics as metrics_router,
    records,
    results as results_router,
    roles as roles_router,
    system_settings as settings_router,
    users as users_router,
)

# ------------------------------------------------------------
# LOGURU CONFIGURATION
# ------------------------------------------------------------
logger.remove()
logger.add(
    sys.stdout,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    colorize=True,
    backtrace=True,
    diagnose=settings.ENV != "prod",
)

# ------------------------------------------------------------
# FASTAPI APP INIT
# ------------------------------------------------------------
app = FastAPI(
    title="University E-Portal API",
    version=metrics_router.APP_VERSION,
    description="Sessions, role-based access and academic records for the university e-portal.",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# ------------------------------------------------------------
# DATABASE ERRORS
# ------------------------------------------------------------
@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=400, content={"detail": "Record conflicts with existing data"})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ------------------------------------------------------------
# CORS CONFIGURATION
# ------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "*"],
)

# ------------------------------------------------------------
# REGISTER ROUTERS
# ------------------------------------------------------------
app.include_router(auth_router.router)
app.include_router(account.router)
app.include_router(users_router.router)
app.include_router(roles_router.router)
app.include_router(roles_router.permissions_router)
app.include_router(results_router.router)
app.include_router(logs_router.router)
app.include_router(settings_router.router)
app.include_router(dashboard_router.router)
app.include_router(metrics_router.router)

for module in (academic, courses, finance, hostels, communication, records, examinations, governance):
    for resource_router in module.routers:
        app.include_router(resource_router)


# ------------------------------------------------------------
# APPLICATION STARTUP EVENTS
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    logger.info("🚀 Starting University E-Portal API...")

    # 1) Database connection test; nothing else works without it
    await test_connection()
    logger.success("Database connection established.")

    # 2) Tables
    await init_db()
    logger.success("Database tables ready.")

    # 3) Permission catalogue, default roles, super admin
    await seed_all()

    logger.success("Backend startup completed successfully.\n")


# ------------------------------------------------------------
# ROOT
# ------------------------------------------------------------
@app.get("/", tags=["System"])
async def root():
    return {
        "status": "ok",
        "service": "University E-Portal API",
        "version": app.version,
        "message": "Backend running successfully 🚀",
    }
