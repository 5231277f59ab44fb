"""FastAPI application factory for the licenseguard web API."""

from __future__ import annotations

from fastapi import FastAPI

from licenseguard import __version__
from licenseguard.config import LicenseGuardConfig, resolve_policy
from licenseguard.policy.models import Policy


def create_app(
    config: LicenseGuardConfig | None = None,
    policy: Policy | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or LicenseGuardConfig.load()

    app = FastAPI(
        title="licenseguard",
        version=__version__,
        docs_url="/api/docs",
    )

    # Policy is loaded once and shared read-only by every request
    app.state.config = config
    app.state.policy = policy or resolve_policy(config)

    from licenseguard.web.api.policies import router as policies_router
    from licenseguard.web.api.scans import router as scans_router

    app.include_router(policies_router, prefix="/api")
    app.include_router(scans_router, prefix="/api")

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app
