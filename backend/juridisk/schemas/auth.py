from pydantic import BaseModel, EmailStr
from typing import Optional


class UserRegister(BaseModel):
    # Presence is checked by AuthService so a missing field maps to a 400
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str
