"""User endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas import (
    UserRegister,
    UserLogin,
    UserProfile,
    LoginResponse,
    UserUpdate,
    UserUpdateResponse,
)
from app.services.users import (
    register_user,
    authenticate_user,
    get_all_users,
    get_user,
    update_user_profile,
)

router = APIRouter()


@router.post("/register", response_model=UserProfile, status_code=201)
def register_endpoint(payload: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account.

    New accounts get the default avatar and background images.

    Example:
        Request:
            POST /api/v1/users/register
            {
                "username": "ada",
                "email": "ada@example.com",
                "password": "analytical",
                "role": 0
            }

        Response (201): the public profile (no password field)

        Response (409):
            {
                "success": false,
                "error": {"code": "conflict", "message": "Email already registered"}
            }
    """
    return register_user(db, payload.username, payload.email, payload.password, payload.role)


@router.post("/login", response_model=LoginResponse)
def login_endpoint(payload: UserLogin, db: Session = Depends(get_db)):
    """
    Verify email and password.

    Returns the user's profile on success and 401 for an unknown email or a
    wrong password. No session token is issued.
    """
    user = authenticate_user(db, payload.email, payload.password)
    return LoginResponse(user=user)


@router.get("", response_model=List[UserProfile])
def list_users_endpoint(db: Session = Depends(get_db)):
    return get_all_users(db)


@router.get("/{user_id}", response_model=UserProfile)
def get_user_endpoint(user_id: str, db: Session = Depends(get_db)):
    return get_user(db, user_id)


@router.put("/{user_id}", response_model=UserUpdateResponse)
def update_user_endpoint(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    """Update profile fields; omitted fields are left unchanged."""
    updated = update_user_profile(db, user_id, **payload.model_dump(exclude_none=True))
    return UserUpdateResponse(updated_fields=updated)
