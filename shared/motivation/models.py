"""Wire models for the chat-completions endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=60, ge=1)

    def to_json(self) -> str:
        return self.model_dump_json()


class ResponseMessage(BaseModel):
    role: str = "assistant"
    content: str


class Choice(BaseModel):
    index: int = 0
    message: ResponseMessage
    finish_reason: str | None = None


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[Choice]
    usage: Usage | None = None

    def first_content(self) -> str | None:
        """Trimmed content of the first choice, or None if there are no choices."""
        if not self.choices:
            return None
        return self.choices[0].message.content.strip()


class ErrorDetail(BaseModel):
    message: str
    type: str | None = None
    code: str | int | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorDetail
