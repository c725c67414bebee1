from typing import Any, Optional
from typing_extensions import Literal
from pydantic import BaseModel, Field

ModeLiteral = Literal["gfm", "raw"]

class YamlOption(BaseModel):
    text: str = ""
    mode: ModeLiteral = "raw"
    layout: Optional[str] = Field(default=None, description="horizontal | vertical (por defecto, el de settings)")

class MetadataRequest(BaseModel):
    text: str

class MetadataResponse(BaseModel):
    found: bool
    metadata: Optional[Any] = None
    body: str
