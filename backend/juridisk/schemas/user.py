from datetime import datetime
from .base import CamelModel


class User(CamelModel):
    id: int
    name: str
    email: str
    created_at: datetime


class UserResponse(CamelModel):
    user: User


class RegisterResponse(CamelModel):
    message: str
    user: User
