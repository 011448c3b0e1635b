from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tabflow_api.backup_schema import PayloadError
from tabflow_api.backup_schema.payload import PAYLOAD_TOO_LARGE
from tabflow_api.google_auth import ErrorCode, GoogleAuthConfig, GoogleTokenVerifier, VerificationError
from tabflow_api.logging_config import configure_app_logging
from tabflow_api.routers import auth, backups, health
from tabflow_api.security.errors import ApiError
from tabflow_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)

VERIFICATION_STATUS = {
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.EXPIRED_TOKEN: 401,
    ErrorCode.INVALID_AUDIENCE: 403,
    ErrorCode.VERIFICATION_FAILED: 401,
}


def create_app(
    config: GoogleAuthConfig | None = None,
    settings: Settings | None = None,
    verifier: GoogleTokenVerifier | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        resolved_settings = settings or get_settings()
        configure_app_logging(resolved_settings.log_level)
        logger.info("App startup beginning")

        app.state.settings = resolved_settings
        # Missing GOOGLE_CLIENT_ID raises ConfigurationError here and aborts startup.
        app.state.token_verifier = verifier or GoogleTokenVerifier(config or GoogleAuthConfig.from_environ())
        logger.info("Token verifier ready (tokeninfo=%s)", app.state.token_verifier.config.tokeninfo_url)

        yield
        # Shutdown (verifier holds no resources)

    app = FastAPI(title="TabFlow API", lifespan=lifespan)

    @app.exception_handler(VerificationError)
    async def verification_error_handler(request: Request, exc: VerificationError) -> JSONResponse:
        return JSONResponse(status_code=VERIFICATION_STATUS[exc.code], content=exc.to_dict())

    @app.exception_handler(PayloadError)
    async def payload_error_handler(request: Request, exc: PayloadError) -> JSONResponse:
        status_code = 413 if exc.code == PAYLOAD_TOO_LARGE else 400
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(backups.router)

    return app


app = create_app()
