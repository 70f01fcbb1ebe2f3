from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from enums.roles import Role


class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=40)
    full_name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr


class UserCreate(UserBase):
    """Admin crea cuentas con rol (y, para WORKER, la ficha vinculada)"""
    password: str = Field(min_length=6)
    role: Role = Role.WORKER
    employee_id: int | None = Field(None, gt=0)


class UserOut(UserBase):
    user_id: int
    role: Role
    status: str
    employee_id: int | None = None
    last_login_at: datetime | None = None

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
