from pydantic import BaseModel
from typing import Optional


class SearchResult(BaseModel):
    title: str
    link: Optional[str] = None
    snippet: str = ""
