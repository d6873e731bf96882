# fifufa/main.py
# Start backend using uvicorn fifufa.main:app --reload --host 0.0.0.0 --port 5000
import logging
import logging.config
import logging.handlers
import json
import pathlib
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from fifufa.core.config import settings
from fifufa.core.errors import AppError, OriginRejectedError
from fifufa.core.metrics import metrics_middleware
from fifufa.core.origins import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_MAX_AGE, OriginGuard
from fifufa.api import facts as facts_router
from fifufa.api import random_words as random_words_router
from fifufa.api import system as system_router
from fifufa.services.inference_client import InferenceClient
from fifufa.services.word_cache import WordCache

_queue_handler_instance: Optional[logging.handlers.QueueHandler] = None # Module-level variable

def configure_logging_from_file():
    """Loads logging configuration from the JSON file and identifies the QueueHandler."""
    global _queue_handler_instance
    config_file = pathlib.Path(__file__).parent / "logging_config.json"
    try:
        with open(config_file) as f_in:
            config = json.load(f_in)
        pathlib.Path("logs").mkdir(exist_ok=True)
        logging.config.dictConfig(config)
    except Exception as e:
        # Missing file, broken JSON or a bad dictConfig all end up on plain stdout logging
        print(f"ERROR: Failed to configure logging from {config_file}: {e}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("fifufa.main.logging_setup_fallback").error("Logging configuration failed.", exc_info=True)
        return

    # The listener behind the QueueHandler is started/stopped by the lifespan
    _queue_handler_instance = next(
        (h for h in logging.getLogger().handlers if isinstance(h, logging.handlers.QueueHandler)), None
    )
    if not _queue_handler_instance:
        logging.getLogger("fifufa.main.logging_setup_check").error(
            "QueueHandler not found in root logger. Off-thread logging will not work as intended."
        )


# Configure logging when the module is loaded. Listener is started/stopped by lifespan.
configure_logging_from_file()
logger = logging.getLogger("fifufa.main") # Logger for this module


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup sequence initiated...")
    if _queue_handler_instance and getattr(_queue_handler_instance, "listener", None):
        try:
            _queue_handler_instance.listener.start()
            logger.info("Logging QueueListener started successfully via lifespan.")
        except Exception as e:
            logger.error(f"Failed to start QueueListener in lifespan: {e}", exc_info=True)
    else:
        logger.warning("QueueHandler or its listener not found during startup; off-thread logging might not be active.")

    logger.info(f"Allowed origins: {sorted(app.state.origin_guard.allowed_origins)}")
    logger.info(f"Using model '{settings.GEMINI_MODEL}' with a {settings.INFERENCE_TIMEOUT_SECONDS}s timeout.")
    yield  # This is where the application will run

    # Word caches are simply dropped with the process
    logger.info("Application shutdown sequence initiated...")
    if _queue_handler_instance and getattr(_queue_handler_instance, "listener", None):
        try:
            _queue_handler_instance.listener.stop()
        except Exception as e:
            print(f"ERROR: Failed to stop QueueListener gracefully in lifespan: {e}")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

# Process-wide collaborators, injected into handlers through fifufa.api.deps
app.state.origin_guard = OriginGuard(settings.allowed_origins)
app.state.inference_client = InferenceClient.from_settings(settings)
app.state.word_cache = WordCache(app.state.inference_client)


async def origin_guard_middleware(request: Request, call_next):
    """Rejects unknown origins before any handler runs and answers preflights with an empty 200."""
    guard: OriginGuard = request.app.state.origin_guard
    origin = request.headers.get("origin")
    if not guard.is_allowed(origin):
        error = OriginRejectedError(origin)
        logger.warning(f"Blocked request from origin {origin!r} to {request.method} {request.url.path}")
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=guard.preflight_headers(origin))
    return await call_next(request)

# Last registered runs first: metrics -> origin guard -> CORS headers -> routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted(app.state.origin_guard.allowed_origins),
    allow_methods=CORS_ALLOW_METHODS,
    allow_headers=CORS_ALLOW_HEADERS,
    max_age=CORS_MAX_AGE,
)
app.middleware("http")(origin_guard_middleware)
app.middleware("http")(metrics_middleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": f"Server error: {str(exc) or exc.__class__.__name__}"})

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"Invalid request: {location} {first.get('msg', '')}".strip()
    logger.warning(f"API request failed: {message}")
    return JSONResponse(status_code=400, content={"error": message})


# Include Routers
app.include_router(system_router.router, prefix=settings.API_PREFIX, tags=["System"])
app.include_router(facts_router.router, prefix=settings.API_PREFIX, tags=["Facts"])
app.include_router(random_words_router.router, prefix=settings.API_PREFIX, tags=["Random Words"])

logger.info("--- FastAPI Registered Routes ---")
for route in app.routes:
    if isinstance(route, APIRoute):
        logger.info(f"Path: {route.path}, Methods: {route.methods}, Name: {route.name}")
logger.info("--- End Registered Routes ---")

# For development with uvicorn: uvicorn fifufa.main:app --reload
