from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1, max_length=72)

class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    is_active: bool

    model_config = {"from_attributes": True}  # ✅ Pydantic v2 style

class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str
    user: UserResponse
