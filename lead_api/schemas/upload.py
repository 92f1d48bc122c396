"""Upload schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UploadedFile(BaseModel):
    """Metadata for a stored upload. Only returned to the client, never persisted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    filename: str
    original_name: str
    mime_type: str
    size: int
    path: str
    url: str


class UploadResponse(BaseModel):
    success: bool = True
    message: str = "File uploaded successfully"
    file: UploadedFile
