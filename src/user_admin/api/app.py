import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_admin.api import responses
from user_admin.api.routes.users import router as users_router
from user_admin.config import get_settings
from user_admin.errors import AdminError, ErrorKind
from user_admin.seed import seed_admin_user

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    logger.info("Starting user-admin API")

    if settings.seed_on_startup:
        await seed_admin_user()

    yield

    logger.info("Shutting down user-admin API")


async def handle_admin_error(request: Request, exc: AdminError) -> JSONResponse:
    logger.info(
        "%s on %s %s: %s", exc.kind.value, request.method, request.url.path, exc.message,
    )
    return responses.from_error(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    errors = [
        {
            "path": [str(p) for p in err["loc"]],
            "message": err["msg"],
            "name": ErrorKind.validation.value,
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=responses.error_body(
            status.HTTP_400_BAD_REQUEST,
            ErrorKind.validation.value,
            "Invalid request",
            {"errors": errors},
        ),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Admin Users",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(AdminError, handle_admin_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.include_router(users_router, prefix="/admin")

    return app


app = create_app()


def main():
    """Entry point for user-admin-api script."""
    uvicorn.run(
        "user_admin.api.app:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
    )
