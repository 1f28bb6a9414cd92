"""
FastAPI main application for the Art Visualizer
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from artviz import __version__
from artviz.core.config import Settings, get_settings, settings
from artviz.core.errors import ErrorKind
from artviz.core.logging import setup_logging
from artviz.middleware import RequestLoggingMiddleware
from artviz.routers import generate_art
from artviz.routers.generate_art import failure_response

setup_logging()
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Art Visualizer API...")

    logger.info("=" * 60)
    logger.info("CONFIGURATION CHECK")
    logger.info("=" * 60)

    api_key = settings.gemini_api_key
    if api_key:
        key_preview = f"{api_key[:7]}...{api_key[-4:]}" if len(api_key) > 11 else "***"
        logger.info(f"✅ GEMINI_API_KEY is set: {key_preview}")
    else:
        logger.error("❌ GEMINI_API_KEY is NOT set - art generation requests will fail!")

    logger.info(f"Orchestration strategy: {settings.orchestration_strategy}")
    logger.info(f"Image model: {settings.gemini_image_model}, text model: {settings.gemini_text_model}")
    logger.info("=" * 60)

    yield

    logger.info("Shutting down Art Visualizer API...")


app = FastAPI(
    title=settings.app_name,
    description="See how art would look in your space",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url="/redoc" if settings.environment == "development" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Generated images come back as large base64 strings
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies with the same envelope as every other failure"""
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        message = "No image provided"
    elif errors:
        message = f"Invalid request body: {errors[0].get('msg', 'validation failed')}"
    else:
        message = "Invalid request body"
    logger.warning(f"Request validation failed on {request.url.path}: {errors}")
    return failure_response(message, ErrorKind.VALIDATION, 400)


@app.get("/health")
async def health_check(app_settings: Settings = Depends(get_settings)):
    """Health check endpoint for load balancers"""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": __version__,
        "strategy": app_settings.orchestration_strategy,
        "gemini_configured": app_settings.gemini_configured,
    }


@app.get("/api")
async def api_info():
    """API information"""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs" if settings.environment == "development" else None,
        "endpoints": {
            "generate_art": "/api/generate-art",
            "art_types": "/api/art-types",
        },
    }


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")


app.include_router(generate_art.router, prefix="/api")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


def run():
    """Console entry point"""
    import uvicorn

    uvicorn.run(
        "artviz.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
        log_config=None,  # Use our custom logging
        access_log=False,  # We handle this in middleware
    )


if __name__ == "__main__":
    run()
