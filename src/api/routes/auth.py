"""Authentication routes (register, login)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from api.dependencies import get_password_hasher, get_user_repo
from api.models import LoginRequest, RegisterRequest, RegisterResponse
from domain.model.errors import (
    AuthenticationError,
    DuplicateError,
    HashingError,
    StoreError,
    VerificationError,
)
from port.password_hasher import PasswordHasher
from port.user_repository import UserRepository
from services import auth_service


logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

LOGIN_SUCCESS_MESSAGE = "Login successful!"


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Register a new user by phone and password.

    Raises:
        HTTPException: 409 if the phone is already registered,
            500 if hashing or storage fails
    """
    try:
        user_id = auth_service.register(repo, hasher, request.phone, request.password)
    except DuplicateError as e:
        logger.info("Registration rejected: phone already registered")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except HashingError as e:
        logger.error("Registration failed: hashing error", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error hashing password"
        )
    except StoreError as e:
        logger.error("Registration failed: storage error", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error saving user"
        )

    logger.info("User registered", extra={"userId": user_id})
    return RegisterResponse(user_id=user_id)


@router.post("/login", response_class=PlainTextResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Check phone and password. No token or session is issued."""
    try:
        user = auth_service.authenticate(repo, hasher, request.phone, request.password)
    except AuthenticationError as e:
        logger.info("Login rejected", extra={"reason": str(e)})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except VerificationError as e:
        logger.error("Login failed: stored digest is invalid", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error verifying password"
        )
    except StoreError as e:
        logger.error("Login failed: storage error", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error looking up user"
        )

    logger.info("User logged in", extra={"userId": user.id})
    return PlainTextResponse(LOGIN_SUCCESS_MESSAGE)
