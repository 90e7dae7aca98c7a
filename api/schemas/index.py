# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: index.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class IndexItem(BaseModel):
    record_id: str = Field(..., min_length=1)
    # attributes the embedding text is built from (PersonRecord fields etc.)
    attributes: Dict[str, Any]
    # attributes projected into search results (username, slug, is_public, ...)
    display: Dict[str, Any] = Field(default_factory=dict)


class IndexRequest(BaseModel):
    items: List[IndexItem] = Field(..., min_length=1)
    current_year: Optional[int] = None


class IndexResponse(BaseModel):
    kind: str
    indexed: int
