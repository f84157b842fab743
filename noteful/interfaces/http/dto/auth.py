from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True)

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)  # No policy check on login


class AuthTokenDTO(BaseModel):
    auth_token: str = Field(serialization_alias="authToken")
