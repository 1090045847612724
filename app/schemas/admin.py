from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    Request body for POST /admin/login.

    Both fields default to empty so that a missing credential is reported
    as invalid credentials rather than as a malformed request.
    """

    username: str = Field(default="", examples=["admin"])
    password: str = Field(default="", examples=["admin123"])


class LoginResponse(BaseModel):
    success: bool = True
    token: str
