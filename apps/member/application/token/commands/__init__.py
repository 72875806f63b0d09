"""Token Commands.

토큰 관련 유스케이스(Command)입니다.
"""

from apps.member.application.token.commands.logout import LogoutInteractor
from apps.member.application.token.commands.reissue import ReissueTokensInteractor

__all__ = ["LogoutInteractor", "ReissueTokensInteractor"]
