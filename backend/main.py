from fastapi import Depends, FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import sys

from api import todo_lists, users
from config.app_config import CORS_ORIGINS, LOG_DIR, LOG_LEVEL
from constants import ApiRoutes, HTTPStatus, ServerConfig
from dependencies import get_authenticated_username
from init_db import init_database
from utils.error_handlers import request_validation_exception_handler
from utils.logging_utils import configure_logging

# Configure logging with rotating file handler
LOG_FILE = configure_logging(LOG_DIR, LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE or 'console only'}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting To Do List API...")
    init_database()
    logger.info("Application startup complete")

    yield

    logger.info("To Do List API stopped")


app = FastAPI(
    title="To Do List API",
    description="A simple REST api to make and manage To Do Lists",
    version="0.0.1",
    lifespan=lifespan,
)

if CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

app.include_router(todo_lists.router, prefix=ApiRoutes.LIST, tags=["to_do_list"])
app.include_router(users.router, prefix=ApiRoutes.USER, tags=["user"])


# Registered after the routers so it only matches paths they do not serve
@app.api_route(
    f"{ApiRoutes.V1}/{{path:path}}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def unknown_api_route(path: str, username: str = Depends(get_authenticated_username)):
    """Unknown paths under /api/v1 still require authentication before reporting 404"""
    raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Not Found")


@app.get(ApiRoutes.HEALTH)
def health():
    """Unauthenticated liveness check"""
    return {"status": "ok", "version": app.version}


@app.get("/")
def root():
    """Root endpoint - API only mode"""
    return {
        "message": "To Do List API",
        "docs": "/docs",
        "health": ApiRoutes.HEALTH,
    }


if __name__ == "__main__":
    import uvicorn
    import socket

    # Check if port is available
    def is_port_in_use(port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((ServerConfig.HOST, port))
                return False
            except OSError:
                return True

    if is_port_in_use(ServerConfig.PORT):
        logger.error(f"❌ Port {ServerConfig.PORT} is already in use!")
        logger.error("   Set TODO_API_PORT to run on a different port.")
        sys.exit(1)

    logger.info(f"🚀 Starting To Do List API on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
