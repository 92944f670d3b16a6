"""Authentication endpoints (register, login, refresh, logout)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from findw.core.deps import get_security
from findw.core.security import SecurityContext
from findw.db.session import get_db
from findw.schemas.auth import LoginRequest, RefreshTokenRequest, RegisterRequest, RegisterResponse, TokenResponse
from findw.services import auth as auth_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
) -> RegisterResponse:
    user = auth_service.register_user(db, security, payload.email, payload.password)
    return RegisterResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
) -> TokenResponse:
    tokens = auth_service.login_user(db, security, payload.email, payload.password)
    return TokenResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    payload: RefreshTokenRequest,
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
) -> TokenResponse:
    tokens = auth_service.refresh_session(db, security, payload.refresh_token)
    return TokenResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    payload: RefreshTokenRequest,
    db: Session = Depends(get_db),
    security: SecurityContext = Depends(get_security),
) -> Response:
    auth_service.logout_user(db, security, payload.refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
