"""Member Profile Use Case Tests."""

from __future__ import annotations

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.member.application.member.commands import (
    ChangeNicknameInteractor,
    UpdateProfileImageInteractor,
)
from apps.member.application.member.exceptions import StorageError
from apps.member.application.member.ports import UploadFile
from apps.member.application.member.queries import GetMemberInfoQuery
from apps.member.domain.exceptions.member import (
    MemberNotFoundError,
    NicknameAlreadyExistsError,
)
from apps.member.tests.unit.factories import (
    FakeTransactionManager,
    InMemoryMemberGateway,
    create_member,
)


class TestGetMemberInfoQuery:
    """GetMemberInfoQuery 테스트."""

    @pytest.mark.asyncio
    async def test_returns_info(self, member_gateway: InMemoryMemberGateway) -> None:
        member = member_gateway.add(create_member(email="me@example.com", image_url="u"))

        info = await GetMemberInfoQuery(member_gateway).execute(member.id)

        assert info.member_id == member.id
        assert info.email == "me@example.com"
        assert info.profile_image == "u"
        assert info.social_type == member.social_type

    @pytest.mark.asyncio
    async def test_deleted_member_is_not_found(
        self,
        member_gateway: InMemoryMemberGateway,
    ) -> None:
        member = member_gateway.add(create_member(deleted=True))

        with pytest.raises(MemberNotFoundError):
            await GetMemberInfoQuery(member_gateway).execute(member.id)


class TestChangeNicknameInteractor:
    """ChangeNicknameInteractor 테스트."""

    @pytest.fixture
    def interactor(
        self,
        member_gateway: InMemoryMemberGateway,
        transaction_manager: FakeTransactionManager,
    ) -> ChangeNicknameInteractor:
        return ChangeNicknameInteractor(member_gateway, transaction_manager)

    @pytest.mark.asyncio
    async def test_change(
        self,
        interactor: ChangeNicknameInteractor,
        member_gateway: InMemoryMemberGateway,
    ) -> None:
        member = member_gateway.add(create_member(nickname="빠른여우#01"))

        info = await interactor.execute(member.id, "새닉네임")

        assert info.nickname == "새닉네임"
        assert member_gateway.members[member.id].nickname == "새닉네임"

    @pytest.mark.asyncio
    async def test_same_nickname_is_noop(
        self,
        interactor: ChangeNicknameInteractor,
        member_gateway: InMemoryMemberGateway,
    ) -> None:
        member = member_gateway.add(create_member(nickname="빠른여우#01"))

        info = await interactor.execute(member.id, "빠른여우#01")

        assert info.nickname == "빠른여우#01"
        assert member_gateway.save_calls == 0

    @pytest.mark.asyncio
    async def test_taken_nickname(
        self,
        interactor: ChangeNicknameInteractor,
        member_gateway: InMemoryMemberGateway,
    ) -> None:
        member_gateway.add(create_member(social_id="a", nickname="빠른여우#01"))
        member = member_gateway.add(create_member(social_id="b", nickname="느린곰#02"))

        with pytest.raises(NicknameAlreadyExistsError):
            await interactor.execute(member.id, "빠른여우#01")

    @pytest.mark.asyncio
    async def test_save_time_conflict_is_reported_as_taken(
        self,
        interactor: ChangeNicknameInteractor,
        member_gateway: InMemoryMemberGateway,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        member = member_gateway.add(create_member(nickname="느린곰#02"))
        member_gateway.reserved_nicknames.add("빠른여우#01")

        with pytest.raises(NicknameAlreadyExistsError):
            await interactor.execute(member.id, "빠른여우#01")

        assert transaction_manager.rollbacks == 1

    @pytest.mark.asyncio
    async def test_unknown_member(self, interactor: ChangeNicknameInteractor) -> None:
        with pytest.raises(MemberNotFoundError):
            await interactor.execute(uuid4(), "닉네임")


class TestUpdateProfileImageInteractor:
    """UpdateProfileImageInteractor 테스트."""

    @pytest.fixture
    def interactor(
        self,
        member_gateway: InMemoryMemberGateway,
        mock_object_storage: AsyncMock,
        transaction_manager: FakeTransactionManager,
    ) -> UpdateProfileImageInteractor:
        return UpdateProfileImageInteractor(
            member_gateway,
            mock_object_storage,
            transaction_manager,
        )

    @pytest.mark.asyncio
    async def test_replaces_image(
        self,
        interactor: UpdateProfileImageInteractor,
        member_gateway: InMemoryMemberGateway,
        mock_object_storage: AsyncMock,
    ) -> None:
        member = member_gateway.add(
            create_member(email="me@example.com", image_url="https://cdn/profile/old.png")
        )
        mock_object_storage.upload.return_value = ["https://cdn/profile/new.png"]
        file = UploadFile(filename="new.png", content=b"png", content_type="image/png")

        info = await interactor.execute(member.id, file)

        mock_object_storage.delete.assert_awaited_once_with("https://cdn/profile/old.png")
        mock_object_storage.upload.assert_awaited_once_with("me@example.com", [file])
        assert info.profile_image == "https://cdn/profile/new.png"

    @pytest.mark.asyncio
    async def test_empty_file_clears_image(
        self,
        interactor: UpdateProfileImageInteractor,
        member_gateway: InMemoryMemberGateway,
        mock_object_storage: AsyncMock,
    ) -> None:
        member = member_gateway.add(create_member(image_url=None))
        mock_object_storage.upload.return_value = []

        info = await interactor.execute(member.id, UploadFile(filename="empty", content=b""))

        mock_object_storage.delete.assert_not_awaited()
        assert info.profile_image is None

    @pytest.mark.asyncio
    async def test_upload_failure_keeps_previous_image(
        self,
        interactor: UpdateProfileImageInteractor,
        member_gateway: InMemoryMemberGateway,
        mock_object_storage: AsyncMock,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        """업로드 실패 시 기존 오브젝트와 URL은 그대로 남는다."""
        member = member_gateway.add(create_member(image_url="https://cdn/profile/old.png"))
        mock_object_storage.upload.side_effect = StorageError("s3 down")
        file = UploadFile(filename="new.png", content=b"png", content_type="image/png")

        with pytest.raises(StorageError):
            await interactor.execute(member.id, file)

        mock_object_storage.delete.assert_not_awaited()
        assert member_gateway.members[member.id].image_url == "https://cdn/profile/old.png"
        assert transaction_manager.rollbacks == 1

    @pytest.mark.asyncio
    async def test_previous_image_removed_after_commit(
        self,
        interactor: UpdateProfileImageInteractor,
        member_gateway: InMemoryMemberGateway,
        mock_object_storage: AsyncMock,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        member = member_gateway.add(create_member(image_url="https://cdn/profile/old.png"))
        mock_object_storage.upload.return_value = ["https://cdn/profile/new.png"]

        commits_at_delete: list[int] = []

        async def _delete(url: str) -> None:
            commits_at_delete.append(transaction_manager.commits)

        mock_object_storage.delete.side_effect = _delete

        await interactor.execute(member.id, UploadFile(filename="new.png", content=b"png"))

        mock_object_storage.delete.assert_awaited_once_with("https://cdn/profile/old.png")
        assert commits_at_delete == [1]

    @pytest.mark.asyncio
    async def test_previous_image_cleanup_failure_is_ignored(
        self,
        interactor: UpdateProfileImageInteractor,
        member_gateway: InMemoryMemberGateway,
        mock_object_storage: AsyncMock,
    ) -> None:
        member = member_gateway.add(create_member(image_url="https://cdn/profile/old.png"))
        mock_object_storage.upload.return_value = ["https://cdn/profile/new.png"]
        mock_object_storage.delete.side_effect = StorageError("s3 down")

        info = await interactor.execute(
            member.id, UploadFile(filename="new.png", content=b"png")
        )

        assert info.profile_image == "https://cdn/profile/new.png"
        assert member_gateway.members[member.id].image_url == "https://cdn/profile/new.png"
