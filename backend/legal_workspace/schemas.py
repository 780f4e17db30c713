from typing import Literal

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class LegalSection(BaseModel):
    section: str
    description: str


class CasePrecedent(BaseModel):
    name: str
    relevance: str


class AnalysisResult(BaseModel):
    """Structured analysis returned by the gateway for one case.

    Field names follow the JSON the model is asked to produce.
    """

    model_config = ConfigDict(frozen=True)

    legalSections: list[LegalSection]
    punishmentRange: str
    presentationStrategy: str
    casePrecedents: list[CasePrecedent]
    courtDocument: str


class AssistRequest(BaseModel):
    type: Literal["analyze", "chat"]
    messages: list[ChatMessage]


class ErrorResponse(BaseModel):
    error: str
