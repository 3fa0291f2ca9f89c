"""
Generic file upload endpoint
"""
from pathlib import Path
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from app.core.deps import get_upload_root
from app.schemas.upload import UploadOut
from app.services.upload_service import get_upload_policy, has_file, store_upload

router = APIRouter()


@router.post("/upload", response_model=UploadOut)
async def upload_file_endpoint(
    file: Optional[UploadFile] = File(None),
    upload_root: Path = Depends(get_upload_root),
):
    """
    Store a single attachment (multipart field "file")

    Returns the URL the file is served from, e.g. /uploads/1718000000000-42.pdf
    """
    if not has_file(file):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    url = await store_upload(file, upload_root, get_upload_policy())
    return UploadOut(url=url)
