from pydantic import BaseModel
from typing import List, Optional


class Part(BaseModel):
    text: Optional[str] = None


class Content(BaseModel):
    parts: Optional[List[Optional[Part]]] = None


class Candidate(BaseModel):
    content: Optional[Content] = None


class GeminiRequest(BaseModel):
    contents: List[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GeminiRequest":
        return cls(contents=[Content(parts=[Part(text=prompt)])])


class GeminiResponse(BaseModel):
    candidates: Optional[List[Optional[Candidate]]] = None

    def first_text(self) -> Optional[str]:
        """Text of the first part of the first candidate, or None if any level is missing or null."""
        if not self.candidates or self.candidates[0] is None:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts or content.parts[0] is None:
            return None
        return content.parts[0].text
