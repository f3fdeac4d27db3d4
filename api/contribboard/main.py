from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from contribboard.config import Settings, load_settings
from contribboard.errors import InvalidInput
from contribboard.routers import health, leaderboard, projects
from contribboard.services.github_client import GitHubClient

_package_logger = logging.getLogger("contribboard")
if not _package_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    _package_logger.addHandler(handler)
_package_logger.setLevel(logging.INFO)
logger = logging.getLogger("contribboard.api")


def _client_identity(request: Request) -> str:
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",", 1)[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    path = str(getattr(route, "path", "") or "") if route is not None else ""
    return path or request.url.path


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Contributor Leaderboard API", version=health.HEALTH_VERSION)
    app.state.settings = settings
    app.state.github_client = GitHubClient.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidInput)
    async def _invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.middleware("http")
    async def log_slow_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            threshold_ms = request.app.state.settings.slow_request_ms
            if elapsed_ms >= threshold_ms or status_code >= 500:
                logger.warning(
                    "slow_api_request method=%s path=%s raw_path=%s status=%s elapsed_ms=%.2f client=%s",
                    request.method,
                    _route_path(request),
                    request.url.path,
                    status_code,
                    elapsed_ms,
                    _client_identity(request),
                )

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect to API documentation."""
        return RedirectResponse(url="/docs")

    app.include_router(leaderboard.router, prefix="/api", tags=["leaderboard"])
    app.include_router(projects.router, prefix="/api", tags=["projects"])
    app.include_router(health.router, prefix="/api", tags=["health"])

    logger.info(
        "api_configured tracked=%s token_configured=%s api_base=%s",
        ",".join(r.full_name for r in settings.tracked_repositories),
        bool(settings.github_token),
        settings.api_base,
    )
    return app


app = create_app()
