# main.py

import datetime
import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.logging_config import setup_logging
from routers import (
    account_router,
    users_router,
    body_weights_router,
    muscles_router,
    muscle_sizes_router,
    equipments_router,
    exercises_router,
    workouts_router,
    exercise_records_router,
)
from utils.errors import AuthenticationError, WorkoutTrackerError

setup_logging()
logger = logging.getLogger(__name__)

API_TITLE = "Workout Tracker API"
API_VERSION = "1.0.0"

# ============================================================
# CONFIGURATION
# ============================================================

app = FastAPI(
    title=API_TITLE,
    version=API_VERSION,
    description="API for tracking workouts, exercises, body weight and muscle sizes",
)

DEFAULT_CORS_ORIGINS = "http://localhost:4200,http://127.0.0.1:4200"
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(WorkoutTrackerError)
async def workout_tracker_error_handler(request: Request, exc: WorkoutTrackerError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Unhandled exception occurred."})


# ============================================================
# ROUTERS
# ============================================================

app.include_router(account_router)
app.include_router(users_router)
app.include_router(body_weights_router)
app.include_router(muscles_router)
app.include_router(muscle_sizes_router)
app.include_router(equipments_router)
app.include_router(exercises_router)
app.include_router(workouts_router)
app.include_router(exercise_records_router)


# ============================================================
# BASIC ROUTES
# ============================================================

@app.get("/")
def read_root():
    """API root"""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "documentation": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
def health_check():
    return {"status": "ok", "timestamp": datetime.datetime.utcnow().isoformat()}


# ============================================================
# ENTRY POINT
# ============================================================

if __name__ == "__main__":
    import uvicorn

    logger.info("Starting %s, docs at http://127.0.0.1:8000/docs", API_TITLE)
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
