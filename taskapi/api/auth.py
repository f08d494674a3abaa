"""Signup/login endpoints and the bearer-token dependency that guards task routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskapi.core.context import AppContext
from taskapi.core.database import get_db
from taskapi.core.errors import (
    EmailAlreadyRegistered,
    InternalFailure,
    InvalidCredentials,
    InvalidTokenError,
    Unauthorized,
)
from taskapi.core.security import (
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)
from taskapi.models import User
from taskapi.schemas.auth import Credentials, TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: Credentials,
    db: Annotated[Session, Depends(get_db)],
    context: Annotated[AppContext, Depends(get_context)],
) -> TokenResponse:
    """
    Register a new user and return a bearer token for it.

    A duplicate email returns 409; any other failure returns a generic 500.
    """
    user = User(email=body.email, password_hash=hash_password(body.password))
    try:
        db.add(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Signup rejected: email already registered")
        raise EmailAlreadyRegistered()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Signup failed: %s", e)
        raise InternalFailure() from e

    logger.info("User signed up: user_id=%s", user.id)
    return TokenResponse(token=create_access_token(user.id, context.jwt_secret))


@router.post("/login", response_model=TokenResponse)
def login(
    body: Credentials,
    db: Annotated[Session, Depends(get_db)],
    context: Annotated[AppContext, Depends(get_context)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a bearer token.

    Unknown email and wrong password produce the same 401 body.
    """
    try:
        user = db.query(User).filter(User.email == body.email).first()
    except SQLAlchemyError as e:
        logger.exception("Login lookup failed: %s", e)
        raise InternalFailure() from e

    if user is None or not verify_password(body.password, user.password_hash):
        raise InvalidCredentials()
    return TokenResponse(token=create_access_token(user.id, context.jwt_secret))


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    context: Annotated[AppContext, Depends(get_context)],
) -> int:
    """Dependency: require a valid Bearer JWT and return its user id. Raises 401 if missing or invalid."""
    if credentials is None:
        logger.debug("Rejected request without bearer token")
        raise Unauthorized()
    try:
        return verify_access_token(credentials.credentials, context.jwt_secret)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e.message)
        raise Unauthorized() from e
