from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from conectidade import schemas
from conectidade.dependencies import get_storage
from conectidade.errors import NotFoundError
from conectidade.storage import Storage
from conectidade.utils.params import parse_id
from conectidade.utils.security import get_current_user

router = APIRouter(prefix="/api/user-skills", tags=["User skills"])


# ======================
# GET: My skills joined with the skill itself
# ======================
@router.get("", response_model=List[schemas.UserSkillWithSkill])
async def list_my_skills(
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_user_skills(current_user.id)


# ======================
# POST: Add (or overwrite) a skill on my profile
# ======================
@router.post("", response_model=schemas.UserSkill, status_code=status.HTTP_201_CREATED)
async def add_my_skill(
    payload: Dict[str, Any] = Body(...),
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    data = schemas.parse_payload(
        schemas.InsertUserSkill,
        {**payload, "userId": current_user.id},
    )

    skill = await storage.get_skill(data.skill_id)
    if not skill:
        raise NotFoundError("Skill not found")

    return await storage.add_user_skill(data)


# ======================
# PATCH: Change teaching/learning flags or level
# ======================
@router.patch("/{skill_id}", response_model=schemas.UserSkill)
async def update_my_skill(
    skill_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    updates = schemas.parse_payload(schemas.UserSkillUpdate, payload)

    parsed_id = parse_id(skill_id)
    user_skill = None
    if parsed_id is not None:
        user_skill = await storage.update_user_skill(current_user.id, parsed_id, updates)
    if not user_skill:
        raise NotFoundError("User skill not found")
    return user_skill


# ======================
# DELETE: Remove a skill from my profile
# ======================
@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_my_skill(
    skill_id: str,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    parsed_id = parse_id(skill_id)
    if parsed_id is not None:
        await storage.remove_user_skill(current_user.id, parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
