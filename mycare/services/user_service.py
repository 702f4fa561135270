"""
User service for the development stub backend
Handles registration, credential checks and profile lookup
"""

from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import Optional
import logging

from mycare.models.user import UserRecord
from mycare.schemas.user import RegisterRequest, LoginRequest, User
from mycare.auth.auth_handler import AuthHandler
from mycare.utils.error_handler import ServiceError

logger = logging.getLogger(__name__)

def split_name(name: str):
    """First word is the first name, the rest the last name"""
    parts = name.split(None, 1)
    return parts[0], parts[1] if len(parts) > 1 else ""

class UserService:
    """Service for user management operations"""

    def __init__(self, db: Session):
        self.db = db
        self.auth_handler = AuthHandler()

    async def create_user(self, user_data: RegisterRequest) -> UserRecord:
        """Create a new user account"""
        email = user_data.email.lower()
        if self.db.query(UserRecord).filter(UserRecord.email == email).first():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="An account with this email already exists"
            )

        try:
            first_name, last_name = split_name(user_data.name)
            db_user = UserRecord(
                email=email,
                hashed_password=self.auth_handler.get_password_hash(user_data.password),
                first_name=first_name,
                last_name=last_name,
                role=user_data.user_type.value
            )

            self.db.add(db_user)
            self.db.commit()
            self.db.refresh(db_user)

            logger.info(f"Created new user: {db_user.id}")
            return db_user

        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create user: {e}")
            raise ServiceError(f"Failed to create user account: {str(e)}", "DATABASE_ERROR", e)

    async def authenticate_user(self, login_data: LoginRequest) -> Optional[UserRecord]:
        """Authenticate user credentials"""
        user = self.db.query(UserRecord).filter(UserRecord.email == login_data.email).first()

        if not user:
            logger.warning("Login attempt with unknown email")
            return None

        if not self.auth_handler.verify_password(login_data.password, user.hashed_password):
            logger.warning(f"Failed login attempt for user: {user.id}")
            return None

        logger.info(f"Successful login for user: {user.id}")
        return user

    async def get_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get user by ID"""
        return self.db.query(UserRecord).filter(UserRecord.id == user_id).first()

    def issue_token(self, user: UserRecord) -> str:
        return self.auth_handler.create_access_token(user.id)

    @staticmethod
    def to_schema(user: UserRecord) -> User:
        return User(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            profile_image=user.profile_image,
            phone_number=user.phone_number,
            address=user.address,
            date_of_birth=user.date_of_birth,
            gender=user.gender,
            created_at=user.created_at,
            updated_at=user.updated_at
        )
