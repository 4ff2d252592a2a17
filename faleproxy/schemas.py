from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class FetchRequest(BaseModel):
    # any JSON value; the relay rejects non-strings
    url: Optional[Any] = Field(None, description="Absolute URL of the page to relay")

class FetchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    content: str = Field(description="Rewritten HTML document")
    title: str = Field(default="", description="Rewritten document title, empty when absent")
    original_url: str = Field(alias="originalUrl", description="URL as requested by the caller")

class ErrorResponse(BaseModel):
    error: str
