# eportal/api/endpoints/metrics.py

import time

import psutil
from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from eportal.api.deps import get_current_user
from eportal.core.database import test_connection
from eportal.models.user import User

APP_VERSION = "1.0.0"

router = APIRouter(prefix="/api", tags=["System & Metrics"])

# Track when the module is loaded for uptime calculation
START_TIME = time.time()


@router.get("/healthcheck")
async def healthcheck():
    return "OK"


@router.get("/private")
async def private(current_user: User = Depends(get_current_user)):
    return {
        "message": f"Hello {current_user.name}, you are signed in",
        "user": {"id": str(current_user.id), "email": current_user.email, "user_type": current_user.user_type},
    }


# ===================================================================
# METRICS (status page)
# ===================================================================
@router.get("/metrics")
async def metrics():
    # 1. System stats
    uptime_seconds = int(time.time() - START_TIME)
    cpu_usage = psutil.cpu_percent(interval=None)
    ram_usage = psutil.virtual_memory().percent
    try:
        disk_usage = psutil.disk_usage("/").percent
    except OSError:
        disk_usage = 0

    # 2. Database health and latency
    db_start = time.perf_counter()
    db_latency = 0.0
    try:
        await test_connection()
        db_status = "Connected"
        db_latency = round((time.perf_counter() - db_start) * 1000, 2)
    except (SQLAlchemyError, OSError):
        logger.exception("Metrics: database ping failed")
        db_status = "Error"

    return {
        "status": "Online",
        "version": APP_VERSION,
        "cpu": cpu_usage,
        "ram": ram_usage,
        "disk": disk_usage,
        "uptime": uptime_seconds,
        "database": db_status,
        "db_latency": db_latency,
    }
