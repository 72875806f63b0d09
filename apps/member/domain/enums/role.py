"""Role Enum."""

from enum import Enum


class Role(str, Enum):
    """회원 권한."""

    USER = "USER"
    ADMIN = "ADMIN"
