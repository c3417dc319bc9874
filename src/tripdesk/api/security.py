"""Session checks for the FastAPI service.

Login (``POST /simple_login``) hands out a session id; every resource route
expects it back in the ``SessionId`` request header. There are no passwords,
no expiry and no roles: a session only pins the caller to one customer.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from tripdesk.api.sessions import SessionStore
from tripdesk.data.seed import Catalog
from tripdesk.logging import get_logger

logger = get_logger(__name__)

SESSION_HEADER = "SessionId"
UNAUTHORIZED_DETAIL = "Session is unauthorized or invalid."

_SESSION_HEADER = APIKeyHeader(name=SESSION_HEADER, auto_error=False)


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def require_customer(
    request: Request,
    session_id: str | None = Depends(_SESSION_HEADER),
    store: SessionStore = Depends(get_session_store),
) -> str:
    """Dependency resolving the ``SessionId`` header to a customer name.

    Missing, empty and unknown ids all fail with ``401``.
    """

    customer_name = store.resolve(session_id)
    if customer_name is None:
        logger.warning("Rejected %s %s: missing or unknown session", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_DETAIL,
        )

    request.state.customer_name = customer_name
    return customer_name
