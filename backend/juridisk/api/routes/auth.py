from fastapi import APIRouter, Depends, status
from ...core.security import get_current_user
from ...models import User
from ...schemas import UserRegister, UserLogin, Token, RegisterResponse, UserResponse
from ...services import AuthService
from ..dependencies import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    user = auth_service.register(user_data)
    return {"message": "Bruger oprettet succesfuldt", "user": user}


@router.post("/login", response_model=Token)
def login(
    user_data: UserLogin,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Login user and return JWT token"""
    return auth_service.login(user_data)


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user"""
    return {"user": current_user}
