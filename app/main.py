import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import engine, Base
from app.core.errors import TodoError
from app.core.logging_setup import setup_logging
from app.models import task, user  # noqa: F401  (enregistre les tables)
from app.routers import health, tasks

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TodoTracker API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TodoError)
def handle_todo_error(request: Request, exc: TodoError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError):
    # Corps ou id invalide -> 400 (et non 422)
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router)
