"""API routes exposing the resolver to a host application."""

from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from google_dns_api.api.models import ErrorDetail
from google_dns_api.core.client import GoogleDNSClient, get_client
from google_dns_api.utils.decorators import sentry_exception_catcher
from google_dns_api.utils.exceptions import (
    DecodeError,
    GoogleDNSError,
    InvalidArgumentError,
    TransportError,
    UpstreamError,
)

router = APIRouter()

# Order matters: first matching class wins
ERROR_STATUS = (
    (InvalidArgumentError, 400),
    (UpstreamError, 502),
    (DecodeError, 502),
    (TransportError, 504),
)


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    client: GoogleDNSClient = field(default_factory=get_client)


# Global dependencies instance (can be overridden for testing)
_dependencies: Optional[RouteDependencies] = None


def get_dependencies() -> RouteDependencies:
    """Get the current route dependencies."""
    global _dependencies  # pylint: disable=global-statement
    if _dependencies is None:
        _dependencies = RouteDependencies()
    return _dependencies


def set_dependencies(deps: RouteDependencies) -> None:
    """Set custom dependencies (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = deps


def reset_dependencies() -> None:
    """Reset dependencies to default (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = None


def error_status(error: GoogleDNSError) -> int:
    """Map a client error to the HTTP status returned to our caller."""
    for error_class, status in ERROR_STATUS:
        if isinstance(error, error_class):
            return status

    return 502


def error_response(error: GoogleDNSError) -> JSONResponse:
    detail = ErrorDetail(error=type(error).__name__, message=str(error))

    if isinstance(error, UpstreamError):
        detail.upstream_status = error.status
        detail.upstream_body = error.body

    return JSONResponse(
        status_code=error_status(error),
        content={"detail": detail.model_dump()},
    )


@router.get("/resolve")
@sentry_exception_catcher
async def resolve(
    name: str = "",
    rr_type: Optional[str] = Query(default=None, alias="type"),
    cd: Optional[bool] = None,
    edns_client_subnet: Optional[str] = None,
    random_padding: Optional[str] = None,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Resolve `name` upstream and pass the JSON answer through unchanged."""
    result = await deps.client.resolve_dns(
        name,
        type=rr_type,
        cd=cd,
        client_subnet=edns_client_subnet,
        padding=random_padding,
    )

    if not result.ok:
        return error_response(result.error)

    return JSONResponse(content=result.value)
