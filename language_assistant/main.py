"""
AI Language Assistant
Main application entry point.
"""

import contextlib
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.cors import CORSMiddleware

from language_assistant import __version__, config
from language_assistant.logger import configure_logging, logger
from language_assistant.middleware import RequestContextMiddleware
from language_assistant.routers import assistant_router

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # uvicorn reconfigures logging on startup
    configure_logging()
    logger.info(
        "Starting up...",
        extra={"provider": config.AI_PROVIDER, "model": config.MODEL_TEXT, "tts_model": config.MODEL_TTS},
    )
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="AI Language Assistant",
    description="Vietnamese/English translation, grammar correction and word lookup powered by Gemini",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


app.include_router(assistant_router, prefix="/api")


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"title": "AI Language Assistant"})


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "provider": config.AI_PROVIDER,
        }
    )
