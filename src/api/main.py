import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uuid

from src.api.routes import enumbers_router, analysis_router
from src.enumbers import get_knowledge_base
from configs import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler; builds the knowledge base eagerly."""
    settings = get_settings()
    logger.info(f"Starting E-number API on {settings.api_host}:{settings.api_port}")
    kb = get_knowledge_base()
    logger.info(f"Knowledge base ready: {kb.stats()['statuses']}")
    logger.info(f"Analysis backend URL: {settings.analysis_backend_url}")
    yield
    logger.info("Shutting down E-number API")


app = FastAPI(
    title="E-number API",
    description="Vegan status lookup for food additives and scanned ingredient lists",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with logging."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "request_id": request_id
        }
    )


app.include_router(enumbers_router)
app.include_router(analysis_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "enumber-api"}


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "E-number API",
        "version": "1.0.0",
        "endpoints": {
            "search": "GET /enumbers/search?q=",
            "select": "GET /enumbers/{code}",
            "stats": "GET /enumbers/stats",
            "annotate": "POST /ingredients/annotate",
            "analyze": "POST /analyze",
            "health": "GET /health"
        }
    }
