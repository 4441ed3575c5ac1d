"""
HTTP API server for the Prize Bond Checker.

Uses FastAPI for the upload endpoints and fastapi_mcp to expose the JSON
endpoints as MCP tools for AI agents.
"""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi_mcp import FastApiMCP
import uvicorn

from ..exceptions import BondCheckError, FileTooLargeError, MissingInputError
from ..models.bond_result import ErrorResponse, MatchResult, NumberCheckRequest
from ..service.bond_checker import BondChecker
from ..storage.upload_store import UploadStore

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

DEFAULT_CORS_ORIGINS = [
    "https://iamrlz.github.io",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

PROCESSING_ERROR = "Failed to process files. Please check formats."


class BondCheckerServer:
    """API server for checking prize bonds against draw results."""

    def __init__(
        self,
        upload_dir: Path = Path("uploads"),
        host: str = "0.0.0.0",
        port: int = 5000,
        cors_origins: Optional[List[str]] = None,
        max_upload_bytes: int = 10 * 1024 * 1024,
        debug: bool = False,
    ):
        """
        Initialize the API server.

        Args:
            upload_dir: Directory for temporarily staged uploads
            host: Server host
            port: Server port
            cors_origins: Origins allowed to call the API
            max_upload_bytes: Maximum size of each uploaded file
            debug: Include exception details in error responses
        """
        self.upload_dir = upload_dir
        self.host = host
        self.port = port
        self.cors_origins = cors_origins if cors_origins is not None else DEFAULT_CORS_ORIGINS
        self.debug = debug
        self.started_at = time.monotonic()

        self.upload_store = UploadStore(upload_dir, max_upload_bytes)
        self.checker = BondChecker(self.upload_store)

        self.app = FastAPI(
            title="Prize Bond Checker",
            description="Checks prize bond numbers against official draw results",
            version=VERSION,
        )
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=self.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()
        self._setup_error_handlers()

        self.mcp = FastApiMCP(
            self.app,
            name="Prize Bond Checker API",
            description="API for checking prize bond numbers against draw results",
            include_operations=["health_check", "check_bond_numbers"],
        )
        self.mcp.mount_http()

    def _error_response(self, status_code: int, message: str, exc: Exception) -> JSONResponse:
        body = ErrorResponse(error=message, details=str(exc) if self.debug else None)
        return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))

    def _setup_error_handlers(self):
        """Map checker errors to HTTP responses."""

        @self.app.exception_handler(BondCheckError)
        async def handle_bond_check_error(request: Request, exc: BondCheckError):
            if isinstance(exc, MissingInputError):
                logger.warning(f"Rejected request to {request.url.path}: {exc}")
                return self._error_response(400, str(exc), exc)
            if isinstance(exc, FileTooLargeError):
                logger.warning(f"Rejected request to {request.url.path}: {exc}")
                return self._error_response(413, str(exc), exc)

            logger.error(f"Error in {request.url.path}: {exc}")
            return self._error_response(500, PROCESSING_ERROR, exc)

        @self.app.exception_handler(Exception)
        async def handle_unexpected_error(request: Request, exc: Exception):
            logger.exception(f"Unexpected error in {request.url.path}: {exc}")
            return self._error_response(500, PROCESSING_ERROR, exc)

    def _setup_routes(self):
        """Setup FastAPI routes."""

        @self.app.get("/", operation_id="status")
        async def status():
            """Report service status and version."""
            return {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "version": VERSION,
            }

        @self.app.get("/health", operation_id="health_check")
        async def health_check():
            """Check server health and uptime."""
            return {
                "status": "healthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "uptime": round(time.monotonic() - self.started_at, 3),
            }

        @self.app.post(
            "/check-bonds",
            operation_id="check_bond_files",
            response_model=MatchResult,
            response_model_by_alias=True,
        )
        async def check_bonds(
            user_file: Optional[UploadFile] = File(None, alias="userFile"),
            draw_file: Optional[UploadFile] = File(None, alias="drawFile"),
        ):
            """
            Check an uploaded bond list against an uploaded draw list.

            Both files may be .txt, .xlsx, .xls or .pdf. Returns every bond
            number of the user file that appears in the draw file.
            """
            return await self.checker.check_uploads(user_file, draw_file)

        @self.app.post(
            "/check-numbers",
            operation_id="check_bond_numbers",
            response_model=MatchResult,
            response_model_by_alias=True,
        )
        async def check_numbers(request: NumberCheckRequest):
            """
            Check prize bond numbers against winning draw numbers.

            Each entry may contain surrounding text; only 6-digit bond
            numbers are compared.
            """
            return self.checker.check_numbers(request.user_numbers, request.draw_numbers)

    def run(self, **kwargs):
        """Run the API server."""
        run_kwargs = {
            "host": self.host,
            "port": self.port,
            "log_level": "info",
        }
        run_kwargs.update(kwargs)

        logger.info(f"Backend running at http://{self.host}:{self.port}")
        logger.info(f"MCP endpoint available at http://{self.host}:{self.port}/mcp")

        uvicorn.run(self.app, **run_kwargs)


def create_server(**kwargs) -> BondCheckerServer:
    """Create an API server instance."""
    return BondCheckerServer(**kwargs)


def run_server(log_level: str = "info", **kwargs):
    """Create and run an API server."""
    server = create_server(**kwargs)
    server.run(log_level=log_level.lower())
