from pydantic import BaseModel


class Part(BaseModel):
    text: str | None = None


class Content(BaseModel):
    parts: list[Part] = []
    role: str | None = None


class Candidate(BaseModel):
    content: Content | None = None
    finishReason: str | None = None


class GenerateContentResponse(BaseModel):
    candidates: list[Candidate] = []
