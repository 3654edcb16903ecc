"""
Main entrypoint for the Ride Sheets API.

This module assembles the FastAPI application, sets up logging and
CORS, and includes the versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn ride_sheets_api.app.main:app --reload

No Google API client is created here; each request builds its own via
the dependencies in ``api.deps``.

Bodies that cannot be parsed or have fields of the wrong type are
answered with 400, like every other client error of this API.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router


def describe_invalid_request(exc: RequestValidationError) -> str:
    """Name the body fields that failed validation, in camelCase."""
    fields = []
    for error in exc.errors():
        loc = error.get("loc", ())
        if len(loc) > 1 and loc[0] == "body" and isinstance(loc[1], str) and loc[1] not in fields:
            fields.append(loc[1])
    if not fields:
        return "Invalid request body"
    return f"Invalid request fields: {', '.join(fields)}"


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that handlers log
    # with the configured format and level.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    # The booking front‑end calls the API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": describe_invalid_request(exc)},
        )

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def read_root() -> dict:
        return {"message": f"{settings.project_name} is running"}

    return app


app = create_app()
