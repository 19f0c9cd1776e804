import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogful.config import settings
from blogful.database import engine
from blogful.errors import ArticleError, InvalidBody
from blogful.logging_config import setup_logging
from blogful.middleware import RequestLoggingMiddleware
from blogful.routers import articles

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    logger.info("Blogful API starting (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title="Blogful API",
    description="Articles resource with validation, sanitisation and partial updates",
    version=VERSION,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handlers
@app.exception_handler(ArticleError)
async def article_error_handler(request: Request, exc: ArticleError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc.__cause__ or exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Path ids are plain strings, so only a malformed body lands here
    logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=InvalidBody().to_body())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=ArticleError().to_body())


# Routers
app.include_router(articles.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}
