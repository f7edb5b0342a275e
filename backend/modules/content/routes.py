"""
Content API endpoints.

- /content: plan-gated catalog for clients
- /pro/content, /pro/upload*: a professional's own content and files
- /admin/content*: content CRUD for admins and professionals
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.middleware.auth import get_current_user, require_action, require_roles
from api.dependencies import get_content_service
from shared.models import AuthenticatedUser, Role
from modules.policy import Action

from .interfaces import IContentService
from .models import (
    ContentFields,
    ContentListResult,
    ContentResult,
    DeletedResult,
    IncomingFile,
    UploadListResult,
    UploadResult,
)

router = APIRouter()

require_professional = require_roles(Role.PROFESSIONAL)
require_content_manager = require_action(Action.MANAGE_CONTENT)


async def to_incoming(upload: Optional[UploadFile]) -> Optional[IncomingFile]:
    """Read a multipart file into memory; empty file fields count as absent."""
    if upload is None or not upload.filename:
        return None
    return IncomingFile(
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
        data=await upload.read(),
    )


@router.get("/content", response_model=ContentListResult)
async def content(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IContentService = Depends(get_content_service),
) -> ContentListResult:
    """Content visible with the caller's plan."""
    return ContentListResult(content=await service.visible_content(user))


# -------------------------------------------------------------------------
# Professional content and uploads
# -------------------------------------------------------------------------


@router.get("/pro/content", response_model=ContentListResult)
async def pro_content(
    user: AuthenticatedUser = Depends(require_professional),
    service: IContentService = Depends(get_content_service),
) -> ContentListResult:
    """Content created by the caller."""
    return ContentListResult(content=await service.content_by_creator(user.id))


@router.post("/pro/upload", response_model=UploadListResult)
async def pro_upload(
    files: list[UploadFile] = File(default=[]),
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    user: AuthenticatedUser = Depends(require_professional),
    service: IContentService = Depends(get_content_service),
) -> UploadListResult:
    """Upload one or more files (mp4, jpeg, png, webp, pdf)."""
    incoming = [file for file in [await to_incoming(f) for f in files] if file]
    items = await service.upload_files(user.id, title, category, incoming)
    return UploadListResult(items=items)


@router.get("/pro/upload/list", response_model=UploadListResult)
async def pro_upload_list(
    user: AuthenticatedUser = Depends(require_professional),
    service: IContentService = Depends(get_content_service),
) -> UploadListResult:
    return UploadListResult(items=await service.list_uploads(user.id))


@router.put("/pro/upload/{upload_id}", response_model=UploadResult)
async def pro_upload_update(
    upload_id: str,
    file: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    user: AuthenticatedUser = Depends(require_professional),
    service: IContentService = Depends(get_content_service),
) -> UploadResult:
    """Rename, recategorize or replace the file of an upload."""
    item = await service.update_upload(user.id, upload_id, title, category, await to_incoming(file))
    return UploadResult(item=item)


@router.delete("/pro/upload/{upload_id}", response_model=DeletedResult)
async def pro_upload_delete(
    upload_id: str,
    user: AuthenticatedUser = Depends(require_professional),
    service: IContentService = Depends(get_content_service),
) -> DeletedResult:
    await service.delete_upload(user.id, upload_id)
    return DeletedResult()


# -------------------------------------------------------------------------
# Admin / professional content CRUD
# -------------------------------------------------------------------------


@router.get("/admin/content", response_model=ContentListResult)
async def admin_content_list(
    user: AuthenticatedUser = Depends(require_content_manager),
    service: IContentService = Depends(get_content_service),
) -> ContentListResult:
    return ContentListResult(content=await service.all_content())


@router.post("/admin/content", response_model=ContentResult)
async def admin_content_create(
    title: str = Form(...),
    category: Optional[str] = Form(None),
    day: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    is_free: bool = Form(False),
    file: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(require_content_manager),
    service: IContentService = Depends(get_content_service),
) -> ContentResult:
    fields = ContentFields(
        title=title,
        category=category,
        day=day,
        description=description,
        is_free=is_free,
    )
    item = await service.create_content(user, fields, await to_incoming(file))
    return ContentResult(content=item)


@router.put("/admin/content/{content_id}", response_model=ContentResult)
async def admin_content_update(
    content_id: str,
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    day: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    is_free: Optional[bool] = Form(None),
    file: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(require_content_manager),
    service: IContentService = Depends(get_content_service),
) -> ContentResult:
    fields = ContentFields(
        title=title,
        category=category,
        day=day,
        description=description,
        is_free=is_free,
    )
    item = await service.update_content(user, content_id, fields, await to_incoming(file))
    return ContentResult(content=item)


@router.delete("/admin/content/{content_id}", response_model=DeletedResult)
async def admin_content_delete(
    content_id: str,
    user: AuthenticatedUser = Depends(require_content_manager),
    service: IContentService = Depends(get_content_service),
) -> DeletedResult:
    await service.delete_content(user, content_id)
    return DeletedResult()
