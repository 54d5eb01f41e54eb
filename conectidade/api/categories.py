from typing import List, Optional

from fastapi import APIRouter, Depends

from conectidade import schemas
from conectidade.dependencies import get_storage
from conectidade.errors import NotFoundError
from conectidade.storage import Storage
from conectidade.utils.params import parse_id, parse_limit

router = APIRouter(prefix="/api/categories", tags=["Categories"])


# ======================
# GET: All categories
# ======================
@router.get("", response_model=List[schemas.Category])
async def list_categories(storage: Storage = Depends(get_storage)):
    return await storage.get_categories()


# ======================
# GET: Popular categories (declared before /{category_id})
# ======================
@router.get("/popular", response_model=List[schemas.Category])
async def list_popular_categories(
    limit: Optional[str] = None,
    storage: Storage = Depends(get_storage),
):
    return await storage.get_popular_categories(parse_limit(limit, default=5))


@router.get("/{category_id}", response_model=schemas.Category)
async def get_category(category_id: str, storage: Storage = Depends(get_storage)):
    parsed_id = parse_id(category_id)
    category = await storage.get_category(parsed_id) if parsed_id is not None else None
    if not category:
        raise NotFoundError("Category not found")
    return category
