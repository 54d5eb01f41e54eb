from typing import List, Optional

from fastapi import APIRouter, Depends

from conectidade import schemas
from conectidade.dependencies import get_storage
from conectidade.errors import NotFoundError
from conectidade.storage import Storage
from conectidade.utils.params import parse_id

router = APIRouter(prefix="/api/skills", tags=["Skills"])


# ======================
# GET: All skills, optionally one category
# ======================
@router.get("", response_model=List[schemas.Skill])
async def list_skills(
    category: Optional[str] = None,
    storage: Storage = Depends(get_storage),
):
    if category:
        return await storage.get_skills_by_category(category)
    return await storage.get_skills()


@router.get("/{skill_id}", response_model=schemas.Skill)
async def get_skill(skill_id: str, storage: Storage = Depends(get_storage)):
    parsed_id = parse_id(skill_id)
    skill = await storage.get_skill(parsed_id) if parsed_id is not None else None
    if not skill:
        raise NotFoundError("Skill not found")
    return skill
