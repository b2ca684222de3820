from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from workout.domain.errors import Forbidden, NotAuthorized, StorageFailure, ValidationError
from workout.events.web_observers import start as start_event_observers
from workout.utilities.constants import MSG_STORAGE_RETRY

# Routers
from workout.api.routes import logs, notes, stats, workouts

# Logging
logger = logging.getLogger("workout_app")

# Initialize FastAPI app
app = FastAPI(title="Workout Schedule & Completion API")

# Include routers
app.include_router(workouts.router)
app.include_router(logs.router)
app.include_router(notes.router)
app.include_router(stats.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for the activity feed when the app starts."""
    start_event_observers()
    logger.info("Web observers for workout events started")


# -------------------- Error mapping --------------------
@app.exception_handler(ValidationError)
def _validation_error(request: Request, exc: ValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
def _request_validation_error(request: Request, exc: RequestValidationError):
    errors = [{"loc": [str(p) for p in err.get("loc", ())], "msg": err.get("msg", "")} for err in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"detail": errors})


@app.exception_handler(NotAuthorized)
def _not_authorized(request: Request, exc: NotAuthorized):
    return JSONResponse(status_code=401, content={"detail": str(exc)})


@app.exception_handler(Forbidden)
def _forbidden(request: Request, exc: Forbidden):
    return JSONResponse(status_code=403, content={"detail": str(exc)})


@app.exception_handler(StorageFailure)
def _storage_failure(request: Request, exc: StorageFailure):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": MSG_STORAGE_RETRY},
                        headers={"Retry-After": "1"})


@app.get("/health")
def health():
    return {"status": "ok"}
