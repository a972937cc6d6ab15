from typing import Any, Literal

from pydantic import BaseModel, TypeAdapter, field_validator


class ProviderErrorPayload(BaseModel):
    code: str
    type: str = ""
    info: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def code_as_string(cls, v):
        # exchangerate.host sends numeric codes (e.g. 101)
        return str(v) if isinstance(v, int) else v


class LiveQuotesPayload(BaseModel):
    success: Literal[True]
    # Values are passed through as sent, not coerced
    quotes: dict[str, Any]
    source: str
    timestamp: int


class LiveFailurePayload(BaseModel):
    success: Literal[False]
    error: ProviderErrorPayload


live_payload_adapter: TypeAdapter[LiveQuotesPayload | LiveFailurePayload] = TypeAdapter(
    LiveQuotesPayload | LiveFailurePayload
)
