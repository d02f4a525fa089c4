from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class CompletionParams(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    model: str
    temperature: float = 0.7
    max_tokens: int = 700


class InferenceClient(Protocol):
    async def generate(self, messages: list[ChatMessage], params: CompletionParams) -> str: ...
