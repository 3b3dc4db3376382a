from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roamster.database import get_db
from roamster.dependencies import get_current_user
from roamster.models.user import User
from roamster.schemas.auth import UserResponse
from roamster.schemas.user import PreferencesUpdateRequest, ProfileUpdateRequest

router = APIRouter()

CLEARABLE_PREFERENCES = {"gender", "clothing_size"}


@router.get("/profile", response_model=UserResponse)
async def get_profile(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    req: ProfileUpdateRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    for field, value in req.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    await db.commit()
    await db.refresh(user)
    return UserResponse.model_validate(user)


@router.put("/preferences", response_model=UserResponse)
async def update_preferences(
    req: PreferencesUpdateRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Update long-term preferences (gender, size, diet, travel style, social intent, language)."""
    for field, value in req.model_dump(exclude_unset=True).items():
        if value is not None or field in CLEARABLE_PREFERENCES:
            setattr(user, field, value)
    await db.commit()
    await db.refresh(user)
    return UserResponse.model_validate(user)
