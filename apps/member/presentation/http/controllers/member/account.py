"""Account Controller.

회원 정보 조회/수정/탈퇴 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from apps.member.application.member.commands import (
    ChangeNicknameInteractor,
    DeleteMemberInteractor,
    UpdateProfileImageInteractor,
)
from apps.member.application.member.ports import UploadFile as StorageUploadFile
from apps.member.application.member.queries import GetMemberInfoQuery
from apps.member.domain.entities.member import Member
from apps.member.presentation.http.auth import get_current_member
from apps.member.presentation.http.schemas import MemberInfoResponse, NicknameChangeRequest
from apps.member.setup.dependencies import (
    get_change_nickname_interactor,
    get_delete_member_interactor,
    get_member_info_query,
    get_update_profile_image_interactor,
)

router = APIRouter()


@router.delete("/withdraw", status_code=status.HTTP_204_NO_CONTENT, summary="회원 탈퇴")
async def withdraw(
    member: Member = Depends(get_current_member),
    interactor: DeleteMemberInteractor = Depends(get_delete_member_interactor),
) -> Response:
    """프로바이더 연결을 해제하고 회원을 탈퇴 처리합니다."""
    await interactor.execute(member.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/user-info",
    response_model=MemberInfoResponse,
    response_model_by_alias=True,
    summary="회원 정보 조회",
)
async def get_user_info(
    member: Member = Depends(get_current_member),
    query: GetMemberInfoQuery = Depends(get_member_info_query),
) -> MemberInfoResponse:
    info = await query.execute(member.id)
    return MemberInfoResponse.from_info(info)


@router.patch(
    "/nickname",
    response_model=MemberInfoResponse,
    response_model_by_alias=True,
    summary="닉네임 변경",
)
async def change_nickname(
    request: NicknameChangeRequest,
    member: Member = Depends(get_current_member),
    interactor: ChangeNicknameInteractor = Depends(get_change_nickname_interactor),
) -> MemberInfoResponse:
    info = await interactor.execute(member.id, request.nickname.strip())
    return MemberInfoResponse.from_info(info)


@router.put(
    "/profile-image",
    response_model=MemberInfoResponse,
    response_model_by_alias=True,
    summary="프로필 이미지 변경",
)
async def update_profile_image(
    image: UploadFile = File(...),
    member: Member = Depends(get_current_member),
    interactor: UpdateProfileImageInteractor = Depends(get_update_profile_image_interactor),
) -> MemberInfoResponse:
    """기존 이미지를 지우고 새 이미지를 업로드합니다. 빈 파일이면 이미지를 제거합니다."""
    content = await image.read()
    file = StorageUploadFile(
        filename=image.filename or "profile",
        content=content,
        content_type=image.content_type,
    )
    info = await interactor.execute(member.id, file)
    return MemberInfoResponse.from_info(info)
