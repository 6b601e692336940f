from pydantic import BaseModel, Field
from typing import List, Optional

from raah.core.config import settings


class TransliterateRequest(BaseModel):
    source_script: str = Field(..., description="Catalog identifier, e.g. devanagari")
    target_script: str = Field(..., description="Catalog identifier, e.g. gurmukhi")
    text: str = Field("", max_length=settings.MAX_TEXT_LEN)


class TransliterateResponse(BaseModel):
    success: bool = True
    output: str
    source_script: str
    target_script: str
    engine: str = Field(..., description="noop, identity, local or remote")
    speech_locale: str = Field(..., description="BCP-47 tag for speaking the output")


class ScriptEntry(BaseModel):
    id: str
    label: str
    sample: str
    remote_name: str
    speech_locale: str
    local_supported: bool


class ScriptsResponse(BaseModel):
    scripts: List[ScriptEntry]


class OCRRequest(BaseModel):
    image: str = Field(..., max_length=settings.MAX_IMAGE_CHARS, description="Captured frame as a base64 data URI")
    languages: Optional[str] = Field(None, description="Tesseract language hint, e.g. eng+hin")


class OCRResponse(BaseModel):
    success: bool = True
    text: str
    detected: bool
    message: str
