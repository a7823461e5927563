"""
Request logging middleware.

Each request is logged against the collection it touches, so a trail of
reads and writes on ``patients.json`` or ``logs.json`` can be followed
through the application log.
"""
import time
import logging
import uuid
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# First path segment under the API prefix -> backing collection
RESOURCE_COLLECTIONS = {
    "patients": "patients",
    "doctors": "doctors",
    "appointments": "appointments",
    "records": "records",
    "dashboard": "patients, appointments, doctors",
}

ADMIN_COLLECTIONS = {
    "users": "users",
    "logs": "logs",
    "health": "users",
}


def collection_for(path: str, prefix: Optional[str] = None) -> Optional[str]:
    """
    Name the collection(s) a request path reads or writes.

    Args:
        path: Request path, e.g. ``/api/patients/17``
        prefix: API prefix the routers are mounted under

    Returns:
        The collection name, or None for paths outside the stored resources
    """
    prefix = (settings.api_prefix if prefix is None else prefix).rstrip("/")
    if prefix and not path.startswith(prefix + "/"):
        return None
    segments = [part for part in path[len(prefix):].split("/") if part]
    if not segments:
        return None
    if segments[0] == "admin":
        return ADMIN_COLLECTIONS.get(segments[1]) if len(segments) > 1 else None
    return RESOURCE_COLLECTIONS.get(segments[0])


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its id, the collection it touches and its timing.

    A caller-supplied ``X-Request-ID`` is kept so the id can be correlated
    with the frontend; otherwise a UUID is generated. The id is echoed back
    together with ``X-Process-Time``.
    """
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        collection = collection_for(request.url.path)
        target = f" [{collection}]" if collection else ""
        logger.info(f"Request {request_id} {request.method} {request.url.path}{target}")

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Request {request_id}{target} failed after {time.time() - start_time:.4f}s: {e}")
            raise

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers[REQUEST_ID_HEADER] = request_id

        if request.method != "GET" and collection and response.status_code < 400:
            logger.info(f"Request {request_id} wrote {collection} ({response.status_code})")
        logger.info(f"Request {request_id} -> {response.status_code} in {process_time:.4f}s")
        return response


def setup_middlewares(app):
    """Add the request logging middleware to the application."""
    app.add_middleware(RequestLoggingMiddleware)
