from pydantic import BaseModel
from typing import List, Optional
from echo3ai.schemas.search import SearchResult


class FactCheckResult(BaseModel):
    report: str
    evidence: List[SearchResult]


class FactCheckRequest(BaseModel):
    statement: str = ""


class FactCheckResponse(BaseModel):
    success: bool
    result: FactCheckResult


class ChatRequest(BaseModel):
    transcript: str = ""
    question: str = ""
    creator: Optional[str] = None
    guest: Optional[str] = None


class ChatResponse(BaseModel):
    success: bool
    answer: str


class LanguageCheckRequest(BaseModel):
    transcript: str = ""
    title: Optional[str] = None
    creator: Optional[str] = None
    guest: Optional[str] = None


class LanguageCheckResponse(BaseModel):
    success: bool
    analysis: str
    warning: Optional[str] = None
