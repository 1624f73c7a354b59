"""Attachment upload: store company documents with the Anthropic Files API.

The returned file ids are passed back to /analyze as fileIds.
"""
from __future__ import annotations

import logging
from typing import Optional

import anthropic
from anthropic import AsyncAnthropic
from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import BaseModel

from fsc_classifier.api.dependencies import get_anthropic_client, verify_api_key
from fsc_classifier.errors import InputValidationError, TransportError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["upload"])


class UploadedFileOut(BaseModel):
    name: str
    size: int
    fileId: str


class CompanyOut(BaseModel):
    name: str
    websiteUrl: str
    emailDomain: str


class UploadResponse(BaseModel):
    company: CompanyOut
    files: list[UploadedFileOut]


async def _upload_one(client: AsyncAnthropic, upload: UploadFile, content: bytes) -> dict:
    filename = upload.filename or "upload"
    try:
        stored = await client.beta.files.upload(
            file=(filename, content, upload.content_type or "application/octet-stream"),
        )
    except anthropic.APIStatusError as e:
        raise TransportError(
            f'Failed to upload "{filename}"',
            status=e.status_code,
            body=e.response.text if e.response is not None else None,
        ) from e
    except anthropic.APIConnectionError as e:
        raise TransportError(f'Failed to upload "{filename}": {e}') from e

    return {
        "name": getattr(stored, "filename", None) or filename,
        "size": getattr(stored, "size_bytes", None) or len(content),
        "fileId": stored.id,
    }


@router.post("/upload", response_model=UploadResponse)
async def upload(
    _: None = Depends(verify_api_key),
    companyName: str = Form(""),
    websiteUrl: Optional[str] = Form(None),
    emailDomain: Optional[str] = Form(None),
    files: Optional[list[UploadFile]] = File(None),
    client: AsyncAnthropic = Depends(get_anthropic_client),
) -> dict:
    """Upload non-empty files and echo the company details back."""
    if not companyName.strip():
        raise InputValidationError("Company name is required.")

    uploaded = []
    for f in files or []:
        content = await f.read()
        if not content:
            continue
        uploaded.append(await _upload_one(client, f, content))

    logger.info(f"Uploaded {len(uploaded)} file(s) for {companyName}")
    return {
        "company": {
            "name": companyName,
            "websiteUrl": websiteUrl or "",
            "emailDomain": emailDomain or "",
        },
        "files": uploaded,
    }
