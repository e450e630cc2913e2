from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    status: str
    image: Optional[str] = None
    created_at: datetime


class ItemIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    status: Optional[str] = None
    image: Optional[str] = None


class ItemStatusIn(BaseModel):
    status: str = Field(..., min_length=1, max_length=50)


class ItemPage(BaseModel):
    items: List[ItemOut]
    total: int
    page: int
    size: int
    pages: int
