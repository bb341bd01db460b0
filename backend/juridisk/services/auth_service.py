from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from ..repositories import UserRepository
from ..core.security import (
    get_password_hash,
    authenticate_user,
    create_access_token,
)
from ..models import User
from ..schemas import UserRegister, UserLogin, Token
from ..exceptions import ValidationError, DuplicateUserError, AuthenticationError, InternalError
import logging

logger = logging.getLogger(__name__)

REGISTRATION_FAILED = "Der opstod en fejl ved oprettelse af bruger"


class AuthService:
    """Service for registration and login"""

    def __init__(self, db: Session):
        self.user_repo = UserRepository(db)
        self.db = db

    def register(self, user_data: UserRegister) -> User:
        """Register a new user and return the stored record"""
        if not user_data.name or not user_data.email or not user_data.password:
            raise ValidationError("Alle felter er påkrævet")

        logger.info(f"Checking if user exists: {user_data.email}")
        try:
            existing_user = self.user_repo.get_by_email(user_data.email)
        except SQLAlchemyError as e:
            logger.error(f"Error checking existing user {user_data.email}: {e}")
            self.user_repo.rollback()
            raise InternalError(REGISTRATION_FAILED)

        if existing_user:
            logger.warning(f"Registration failed: email already exists - {user_data.email}")
            raise DuplicateUserError()

        logger.info(f"Creating new user: {user_data.email}")
        try:
            new_user = self.user_repo.create(
                name=user_data.name,
                email=user_data.email,
                hashed_password=get_password_hash(user_data.password),
            )
            self.user_repo.commit()
            self.user_repo.refresh(new_user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            logger.warning(f"Registration failed: unique email violated - {user_data.email}")
            self.user_repo.rollback()
            raise DuplicateUserError()
        except SQLAlchemyError as e:
            logger.error(
                f"Error creating user {user_data.email}: {e}",
                extra={"email": user_data.email, "error_type": type(e).__name__},
            )
            self.user_repo.rollback()
            raise InternalError(REGISTRATION_FAILED)

        logger.info(f"User registered successfully: {new_user.id}")
        return new_user

    def login(self, user_data: UserLogin) -> Token:
        """Login user and return JWT token"""
        logger.info(f"Attempting login for: {user_data.email}")

        user = authenticate_user(self.db, user_data.email, user_data.password)
        if not user:
            logger.warning(f"Login failed for: {user_data.email}")
            raise AuthenticationError("Invalid email or password")

        logger.info(f"User logged in successfully: {user.id}")
        return Token(access_token=create_access_token(user.id), token_type="bearer")
