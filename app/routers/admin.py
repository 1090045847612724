from typing import Optional

from fastapi import APIRouter, Body

from app.core.config import settings
from app.schemas.admin import LoginRequest, LoginResponse
from app.schemas.weather import ErrorResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Admin login",
    description=(
        "Exchanges the configured admin credentials for the configured token. "
        "A missing body or missing fields count as invalid credentials."
    ),
)
def admin_login(payload: Optional[LoginRequest] = Body(None)):
    payload = payload or LoginRequest()
    token = AuthService(settings).login(payload.username, payload.password)
    return LoginResponse(token=token)
