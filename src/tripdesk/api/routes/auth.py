from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from tripdesk.api.security import get_catalog, get_session_store
from tripdesk.api.sessions import SessionStore
from tripdesk.data.seed import Catalog
from tripdesk.logging import get_logger
from tripdesk.models import LoginRequest, LoginResponse

logger = get_logger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/simple_login", response_model=LoginResponse, name="SimpleLogin")
def simple_login(
    payload: LoginRequest | None = None,
    store: SessionStore = Depends(get_session_store),
    catalog: Catalog = Depends(get_catalog),
):
    """Exchange a known user name for a fresh session id."""

    user_name = payload.userName if payload is not None else None
    if not user_name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="UserName is required.")

    customer_name = catalog.customer_for(user_name)
    if customer_name is None:
        logger.warning("Login refused for unknown user %r", user_name)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unknown user name.")

    session_id = store.issue(customer_name)
    logger.info("User %s logged in as %s", user_name, customer_name)
    return LoginResponse(sessionId=session_id)
