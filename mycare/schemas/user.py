"""
Pydantic schemas for users and authentication results
"""

from pydantic import BaseModel, Field, validator, EmailStr
from typing import Optional, Any, Dict
from datetime import datetime
from enum import Enum

class UserRole(str, Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

class User(BaseModel):
    """Authenticated account as exchanged with the backend (camelCase on the wire)"""
    id: str = Field(..., description="Immutable account identifier")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field("", alias="lastName")
    role: UserRole = Field(UserRole.PATIENT, description="Account role")
    profile_image: Optional[str] = Field(None, alias="profileImage")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    address: Optional[str] = None
    date_of_birth: Optional[str] = Field(None, alias="dateOfBirth")
    gender: Optional[Gender] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True

class UserUpdate(BaseModel):
    """Partial user update; the identifier is not part of it"""
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    role: Optional[UserRole] = None
    profile_image: Optional[str] = Field(None, alias="profileImage")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    address: Optional[str] = None
    date_of_birth: Optional[str] = Field(None, alias="dateOfBirth")
    gender: Optional[Gender] = None

    class Config:
        populate_by_name = True

    def to_partial(self) -> Dict[str, Any]:
        """Only the fields that were explicitly set, keyed the way they are stored"""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

class RegisterRequest(BaseModel):
    """Registration payload accepted by the stub backend"""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., max_length=128, description="Password (minimum 8 characters)")
    user_type: UserRole = Field(UserRole.PATIENT, alias="userType")

    class Config:
        populate_by_name = True

    @validator('name')
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Name is required')
        return v

    @validator('password')
    def validate_password(cls, v):
        if len(v) < 8:
            raise ValueError('Password must be at least 8 characters long')
        return v

class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @validator('email')
    def normalize_email(cls, v):
        return v.strip().lower()

class TokenResponse(BaseModel):
    """Successful login/registration response"""
    success: bool = True
    token: str
    user: User

class ProfileResponse(BaseModel):
    success: bool = True
    user: User

class AuthResult(BaseModel):
    """Normalized outcome of an auth service call; user is passed through unvalidated"""
    success: bool
    token: Optional[str] = None
    user: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

class ActionResult(BaseModel):
    """Outcome of a session operation"""
    success: bool
    error: Optional[str] = None
