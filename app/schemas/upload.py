"""
Upload schemas
"""
from pydantic import BaseModel


class UploadOut(BaseModel):
    """Where a stored upload can be fetched from"""
    url: str
