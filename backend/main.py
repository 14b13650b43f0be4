from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from config import settings
from logging_setup import configure_logging, get_logger
from security import SecurityHeadersMiddleware
from routes import health_router, analyze_router, waitlist_router, pages_router
from routes.pages import WEB_DIR

configure_logging()
logger = get_logger("app")

ANALYSIS_PATHS = {"/api/analyze", "/api/analyse"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    print(f"""
+======================================================+
|                                                      |
|   ARES DEFENSE ENGINE                                |
|   v{settings.VERSION:<50}|
|                                                      |
|   Environment: {settings.ENVIRONMENT:<15}                       |
|   Waitlist Sink: {settings.WAITLIST_SINK:<15}                     |
|   Mode: DEFENSIVE ONLY                               |
|                                                      |
+======================================================+
    """)
    yield
    print("\n[ARES] Shutdown.\n")


app = FastAPI(
    title="ARES API",
    version=settings.VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    # Routes raise with a dict detail that is the whole response body
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # An unparseable body on the analysis route counts as an analysis failure
    if request.url.path in ANALYSIS_PATHS and any(e.get("type") == "json_invalid" for e in exc.errors()):
        logger.error("analysis error: unparseable JSON body")
        return JSONResponse(status_code=500, content={"error": "Analysis failed"})
    logger.info("malformed request to %s: %d error(s)", request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "MALFORMED_REQUEST"})


@app.exception_handler(Exception)
async def error_handler(request: Request, exc: Exception):
    logger.error("%s: %s", type(exc).__name__, exc)
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal error"})


app.include_router(health_router, prefix="/api")
app.include_router(analyze_router, prefix="/api")
app.include_router(waitlist_router, prefix="/api")
app.include_router(pages_router)

app.mount("/static", StaticFiles(directory=WEB_DIR / "static"), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
