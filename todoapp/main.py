"""Main FastAPI application for the todo API."""

import logging
import uuid

from fastapi import FastAPI, Request

from todoapp import __version__
from todoapp.api.routes import router as api_router
from todoapp.logging_utils import configure_logging, reset_request_id, set_request_id
from todoapp.settings import get_settings

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Todo API",
    description="A todo list with filtered views and a random joke endpoint",
    version=__version__,
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(token)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with basic API info."""
    return {
        "message": "Todo API",
        "endpoints": "/api/todos",
    }


app.include_router(api_router, prefix="/api")
app.include_router(api_router)


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Starting on 0.0.0.0:%s (ENVIRONMENT=%s)", settings.port, settings.environment or "unset")
    uvicorn.run(
        "todoapp.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
