"""
Authentication schemas
"""
from pydantic import BaseModel, Field, ConfigDict


class LoginRequest(BaseModel):
    """Login request schema"""
    emp_code: str = Field(..., alias="empCode", description="Employee code")
    password: str = Field(..., description="Password")

    model_config = ConfigDict(populate_by_name=True)


class TokenResponse(BaseModel):
    """Token response schema"""
    access_token: str
    token_type: str = "bearer"
