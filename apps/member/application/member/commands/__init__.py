"""Member Commands.

회원 관련 유스케이스(Command)입니다.
"""

from apps.member.application.member.commands.change_nickname import (
    ChangeNicknameInteractor,
)
from apps.member.application.member.commands.delete_member import DeleteMemberInteractor
from apps.member.application.member.commands.login import LoginInteractor
from apps.member.application.member.commands.update_profile_image import (
    UpdateProfileImageInteractor,
)

__all__ = [
    "LoginInteractor",
    "DeleteMemberInteractor",
    "ChangeNicknameInteractor",
    "UpdateProfileImageInteractor",
]
