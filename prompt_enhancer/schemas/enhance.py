"""
Pydantic schemas for the prompt enhancement endpoint.

The wire contract uses camelCase ("enhancedPrompt") for compatibility with the
bundled browser client; Python code uses the snake_case field names.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EnhanceRequest(BaseModel):
    """
    Request body for POST /api/enhance.

    `prompt` is optional at the schema level so that a missing prompt can be
    answered with the 400 "Prompt is required" error instead of a 422.
    """
    prompt: Optional[str] = Field(
        None,
        description="Free-text project request to enhance",
        examples=["Create me a website", "Build a backend API for user auth"]
    )


class EnhanceResponse(BaseModel):
    """Response body for a successful enhancement."""
    enhanced_prompt: str = Field(
        ...,
        alias="enhancedPrompt",
        description="Expanded prompt with stack, best practices and setup steps"
    )

    class Config:
        """Pydantic model configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "enhancedPrompt": 'Enhanced version of request: "Create me a website"\n\n...'
            }
        }


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""
    error: str = Field(..., description="Human-readable error message", examples=["Prompt is required"])
