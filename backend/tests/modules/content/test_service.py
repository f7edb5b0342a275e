"""Tests for the content service."""

import logging
from unittest.mock import AsyncMock

import pytest

from shared.models import Plan, Role
from shared.storage import StorageError
from modules.content.interfaces import IContentService
from modules.content.models import ContentFields, IncomingFile
from modules.content.service import ContentService
from modules.content.exceptions import (
    ContentAccessDeniedError,
    ContentNotFoundError,
    MissingTitleError,
    NoFilesError,
    UnsupportedFileTypeError,
    UploadNotFoundError,
)
from tests.conftest import make_user

CONTENTS = "contents"
UPLOADS = "pro_uploads"


def pdf(name: str = "guide.pdf") -> IncomingFile:
    return IncomingFile(filename=name, content_type="application/pdf", data=b"%PDF-1.7")


def exe(name: str = "tool.exe") -> IncomingFile:
    return IncomingFile(filename=name, content_type="application/x-msdownload", data=b"MZ")


@pytest.fixture
def service(gateway, storage) -> ContentService:
    return ContentService(gateway, storage)


@pytest.fixture
def catalog(gateway):
    return gateway.seed(
        CONTENTS,
        {"id": "c3", "title": "Breathing", "category": "yoga", "day": 2, "is_free": False, "created_by": "pro-1"},
        {"id": "c1", "title": "Welcome", "category": "intro", "day": 1, "is_free": True, "created_by": "admin-1"},
        {"id": "c2", "title": "Stretch", "category": "yoga", "day": 1, "is_free": True, "created_by": "pro-1"},
        {"id": "c4", "title": "Deep sleep", "category": "intro", "day": 2, "is_free": False, "created_by": "pro-2"},
    )


class TestVisibleContent:
    def test_implements_interface(self, service):
        assert isinstance(service, IContentService)

    @pytest.mark.asyncio
    async def test_free_plan_sees_only_free_items(self, service, catalog, free_user):
        items = await service.visible_content(free_user)
        assert [item.id for item in items] == ["c1", "c2"]
        assert all(item.is_free for item in items)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("plan", [Plan.SILVER, Plan.PREMIUM, Plan.STUDENT])
    async def test_paid_plans_see_everything_ordered(self, service, catalog, plan):
        items = await service.visible_content(make_user("c", Role.CLIENT, plan))
        assert [item.id for item in items] == ["c1", "c4", "c2", "c3"]

    @pytest.mark.asyncio
    async def test_content_by_creator(self, service, catalog):
        items = await service.content_by_creator("pro-1")
        assert {item.id for item in items} == {"c2", "c3"}


class TestUploads:
    @pytest.mark.asyncio
    async def test_upload_stores_files_and_rows(self, service, gateway, storage, pro_user):
        image = IncomingFile(filename="cover.png", content_type="image/png", data=b"\x89PNG")

        uploads = await service.upload_files(pro_user.id, "Week 1", "yoga", [pdf(), image])

        assert [u.mime for u in uploads] == ["application/pdf", "image/png"]
        assert all(u.pro_id == pro_user.id for u in uploads)
        assert all(u.filepath.startswith(f"{storage.BASE_URL}/uploads/") for u in uploads)
        assert len(storage.files) == 2
        assert len(gateway.rows(UPLOADS)) == 2

    @pytest.mark.asyncio
    async def test_disallowed_type_stores_nothing(self, service, gateway, storage, pro_user):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            await service.upload_files(pro_user.id, "Week 1", "yoga", [pdf(), exe()])

        assert exc_info.value.status_code == 400
        assert storage.files == {}
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_no_files(self, service, pro_user):
        with pytest.raises(NoFilesError):
            await service.upload_files(pro_user.id, "Week 1", "yoga", [])

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_professional(self, service, pro_user):
        await service.upload_files(pro_user.id, "Mine", None, [pdf()])
        await service.upload_files("pro-other", "Theirs", None, [pdf()])

        uploads = await service.list_uploads(pro_user.id)
        assert [u.title for u in uploads] == ["Mine"]

    @pytest.mark.asyncio
    async def test_update_metadata(self, service, pro_user):
        [upload] = await service.upload_files(pro_user.id, "Draft", None, [pdf()])
        updated = await service.update_upload(pro_user.id, upload.id, "Final", "nutrition", None)
        assert (updated.title, updated.category) == ("Final", "nutrition")
        assert updated.filepath == upload.filepath

    @pytest.mark.asyncio
    async def test_replace_file_removes_old_object(self, service, storage, pro_user):
        [upload] = await service.upload_files(pro_user.id, "Draft", None, [pdf("old.pdf")])
        video = IncomingFile(filename="new.mp4", content_type="video/mp4", data=b"\x00")

        updated = await service.update_upload(pro_user.id, upload.id, None, None, video)

        assert updated.mime == "video/mp4"
        assert updated.filepath.endswith("_new.mp4")
        [(bucket, path)] = storage.removed
        assert bucket == "uploads" and path.endswith("_old.pdf")

    @pytest.mark.asyncio
    async def test_cannot_touch_other_professionals_upload(self, service, gateway, pro_user):
        [upload] = await service.upload_files("pro-other", "Theirs", None, [pdf()])

        with pytest.raises(UploadNotFoundError):
            await service.update_upload(pro_user.id, upload.id, "Mine now", None, None)
        with pytest.raises(UploadNotFoundError):
            await service.delete_upload(pro_user.id, upload.id)
        assert len(gateway.rows(UPLOADS)) == 1

    @pytest.mark.asyncio
    async def test_delete_removes_row_and_file(self, service, gateway, storage, pro_user):
        [upload] = await service.upload_files(pro_user.id, "Draft", None, [pdf()])
        await service.delete_upload(pro_user.id, upload.id)
        assert gateway.rows(UPLOADS) == []
        assert storage.files == {}

    @pytest.mark.asyncio
    async def test_delete_succeeds_when_object_removal_fails(self, service, gateway, storage, pro_user, caplog):
        [upload] = await service.upload_files(pro_user.id, "Draft", None, [pdf()])
        storage.remove = AsyncMock(side_effect=StorageError("uploads", "x.pdf", "timeout"))

        with caplog.at_level(logging.WARNING, logger="modules.content.service"):
            await service.delete_upload(pro_user.id, upload.id)

        assert gateway.rows(UPLOADS) == []
        storage.remove.assert_awaited_once()
        assert "Orphaned object" in caplog.text

    @pytest.mark.asyncio
    async def test_replace_succeeds_when_old_object_removal_fails(self, service, gateway, storage, pro_user):
        [upload] = await service.upload_files(pro_user.id, "Draft", None, [pdf("old.pdf")])
        storage.remove = AsyncMock(side_effect=StorageError("uploads", "old.pdf", "timeout"))
        video = IncomingFile(filename="new.mp4", content_type="video/mp4", data=b"\x00")

        updated = await service.update_upload(pro_user.id, upload.id, None, None, video)

        assert updated.mime == "video/mp4"
        assert gateway.rows(UPLOADS)[0]["filepath"] == updated.filepath


class TestContentManagement:
    @pytest.mark.asyncio
    async def test_create_with_file(self, service, storage, pro_user):
        item = await service.create_content(
            pro_user,
            ContentFields(title="Breathing", category="yoga", day=3, is_free=True),
            pdf(),
        )
        assert item.created_by == pro_user.id
        assert item.is_free is True
        assert item.url.startswith(f"{storage.BASE_URL}/contents/")

    @pytest.mark.asyncio
    async def test_create_defaults_to_paid(self, service, admin_user):
        item = await service.create_content(admin_user, ContentFields(title="Intro"), None)
        assert item.is_free is False
        assert item.url is None

    @pytest.mark.asyncio
    async def test_create_requires_title(self, service, admin_user):
        with pytest.raises(MissingTitleError):
            await service.create_content(admin_user, ContentFields(title="  "), None)

    @pytest.mark.asyncio
    async def test_create_rejects_disallowed_file(self, service, storage, admin_user):
        with pytest.raises(UnsupportedFileTypeError):
            await service.create_content(admin_user, ContentFields(title="Intro"), exe())
        assert storage.files == {}

    @pytest.mark.asyncio
    async def test_all_content(self, service, catalog):
        assert len(await service.all_content()) == 4

    @pytest.mark.asyncio
    async def test_admin_edits_any_item(self, service, catalog, admin_user):
        item = await service.update_content(admin_user, "c4", ContentFields(is_free=True), None)
        assert item.is_free is True
        assert item.title == "Deep sleep"

    @pytest.mark.asyncio
    async def test_professional_edits_own_item(self, service, catalog, pro_user):
        item = await service.update_content(pro_user, "c3", ContentFields(title="Box breathing"), None)
        assert item.title == "Box breathing"

    @pytest.mark.asyncio
    async def test_professional_cannot_edit_others(self, service, gateway, catalog, pro_user):
        with pytest.raises(ContentAccessDeniedError):
            await service.update_content(pro_user, "c4", ContentFields(title="Mine"), None)
        with pytest.raises(ContentAccessDeniedError):
            await service.delete_content(pro_user, "c4")
        assert len(gateway.rows(CONTENTS)) == 4

    @pytest.mark.asyncio
    async def test_missing_item(self, service, admin_user):
        with pytest.raises(ContentNotFoundError):
            await service.delete_content(admin_user, "nope")

    @pytest.mark.asyncio
    async def test_delete(self, service, gateway, catalog, admin_user):
        await service.delete_content(admin_user, "c1")
        assert "c1" not in {row["id"] for row in gateway.rows(CONTENTS)}
