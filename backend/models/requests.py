from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class FactCheckRequest(BaseModel):
    """Request body for /api/factcheck."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "prompt": "The Earth is flat"
            }
        }
    )

    prompt: StrictStr

    @field_validator("prompt")
    @classmethod
    def require_text(cls, v: str) -> str:
        # Only presence is checked; the claim is forwarded untouched.
        if not v.strip():
            raise ValueError("prompt cannot be blank")
        return v


class ErrorResponse(BaseModel):
    error: str
