"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
import base64
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

class GenerateTextIn(BaseModel):
    # Unvalidated; forwarded to the model as sent.
    prompt: Any = None

class GenerateOut(BaseModel):
    output: str

class ErrorOut(BaseModel):
    error: str

class HealthOut(BaseModel):
    status: str
    model: str

@dataclass(frozen=True)
class BinaryAttachment:
    """Uploaded bytes sent inline alongside the prompt."""
    raw_bytes: bytes
    mime_type: str | None = None

    def encoded(self) -> str:
        return base64.b64encode(self.raw_bytes).decode("ascii")

    def to_part(self) -> dict[str, Any]:
        """
        Render as a Gemini inline data part.

        The mime type key is omitted when unknown.
        """
        inline: dict[str, Any] = {"data": self.encoded()}
        if self.mime_type:
            inline["mime_type"] = self.mime_type
        return {"inline_data": inline}

@dataclass(frozen=True)
class GenerationRequest:
    """Prompt text plus at most one attachment."""
    prompt_text: Any
    attachment: BinaryAttachment | None = None

    def contents(self) -> Any:
        if self.attachment is None:
            return self.prompt_text
        return [self.prompt_text, self.attachment.to_part()]
