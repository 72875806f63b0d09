"""Member Ports."""

from apps.member.application.member.ports.member_gateway import MemberGateway
from apps.member.application.member.ports.object_storage import ObjectStorage, UploadFile
from apps.member.application.member.ports.registration_notifier import (
    RegistrationNotifier,
)

__all__ = [
    "MemberGateway",
    "ObjectStorage",
    "UploadFile",
    "RegistrationNotifier",
]
