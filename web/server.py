"""HTTP server - JSON routes over the sheet loader, static files and SPA fallback."""

import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, JSONResponse
from loguru import logger

from app.container import Container
from app.container import container as default_container
from settings import ALLOWED_ORIGINS, STATIC_DIR
from sheets_client import UpstreamUnavailable
from web.api import sheets
from web.api.errors import MissingConfigError, TabNotFound
from web.api.sheets.schemas import HealthResponse, TableResponse, TabsResponse


def resolve_static(static_dir: Path, path: str) -> Path | None:
    """File under static_dir for a request path (``/about`` may be ``about.html``)."""
    if not path:
        return None

    root = static_dir.resolve()
    for candidate in (root / path, root / f"{path}.html", root / path / "index.html"):
        try:
            target = candidate.resolve()
            # Reject anything that escapes the static root (../, symlinks)
            if target.is_relative_to(root) and target.is_file():
                return target
        except (OSError, ValueError):
            # Null bytes, overlong names
            continue
    return None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    container: Container | None = None,
    static_dir: Path = STATIC_DIR,
    allowed_origins: list[str] | None = None,
) -> FastAPI:
    """Build the FastAPI application."""
    container = container or default_container
    origins = ALLOWED_ORIGINS if allowed_origins is None else allowed_origins

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        static_dir.mkdir(parents=True, exist_ok=True)
        await container.init()
        logger.info("Server ready (static dir: {})", static_dir)
        yield
        await container.close()

    app = FastAPI(title="Sheets Proxy", version="1.0.0", lifespan=lifespan)
    app.state.container = container

    # Empty allow-list = every origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "{} {} {} {:.1f}ms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )

    # Error handlers
    @app.exception_handler(TabNotFound)
    async def tab_not_found_handler(_request: Request, exc: TabNotFound):
        logger.info("Unknown tab requested: {}", exc.tab_name)
        return _error(404, exc.message)

    @app.exception_handler(MissingConfigError)
    async def missing_config_handler(_request: Request, exc: MissingConfigError):
        return _error(400, exc.message)

    @app.exception_handler(UpstreamUnavailable)
    async def upstream_handler(request: Request, exc: UpstreamUnavailable):
        logger.error("Upstream failure on {}: {}", request.url.path, exc.message)
        return _error(502, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error on {}", request.url.path)
        return _error(500, "Internal server error")

    # Routes
    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(ts=int(time.time() * 1000))

    @app.get("/api/sheets", response_model=TabsResponse)
    async def list_sheets():
        return await sheets.get_tabs(container)

    @app.get("/api/data/{tab:path}", response_model=TableResponse)
    async def read_tab(tab: str):
        return await sheets.get_tab(container, tab)

    @app.get("/api/data-all", response_model=dict[str, TableResponse])
    async def read_all_tabs():
        return await sheets.get_all_tabs(container)

    @app.get("/api/municipios")
    async def municipios():
        target = static_dir / "municipios.json"
        if not target.is_file():
            return _error(404, "municipios.json not found")
        return FileResponse(target, media_type="application/json")

    # Static assets, then index.html for client-side routes
    @app.get("/{path:path}", include_in_schema=False)
    async def static_or_index(path: str):
        target = resolve_static(static_dir, path)
        if target is not None:
            return FileResponse(target)

        index = static_dir / "index.html"
        if index.is_file():
            return FileResponse(index)
        return _error(404, "Not found")

    return app
