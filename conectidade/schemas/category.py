from typing import Optional

from pydantic import Field

from conectidade.schemas.base import CamelModel


class InsertCategory(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon_name: Optional[str] = None
    image_url: Optional[str] = None


class Category(InsertCategory):
    id: int
