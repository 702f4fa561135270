"""
Account endpoints of the development stub backend
Mounted under both /api/users and /api/auth
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from mycare.database import get_db
from mycare.schemas.user import RegisterRequest, LoginRequest, TokenResponse, ProfileResponse
from mycare.services.user_service import UserService
from mycare.auth.auth_handler import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new account and return a token for it"""
    user_service = UserService(db)
    new_user = await user_service.create_user(user_data)
    return TokenResponse(token=user_service.issue_token(new_user), user=UserService.to_schema(new_user))

@router.post("/login", response_model=TokenResponse)
async def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate and return a token"""
    user_service = UserService(db)
    user = await user_service.authenticate_user(login_data)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return TokenResponse(token=user_service.issue_token(user), user=UserService.to_schema(user))

@router.get("/profile", response_model=ProfileResponse)
async def profile(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Profile of the authenticated account"""
    user = await UserService(db).get_user_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please authenticate"
        )
    return ProfileResponse(user=UserService.to_schema(user))
