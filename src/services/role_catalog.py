"""
역할 카탈로그: 역할 이름 -> 권한 토큰 목록의 고정된 조회 테이블.

네 역할의 권한 목록은 상속이 아니라 열거(enumeration)로 정의됩니다.
설계상 ADMIN ⊇ MANAGER ⊇ MEMBER ⊇ OBSERVER 포함 관계가 유지되어야 하며,
카탈로그를 수정할 때 이 관계를 손으로 맞춰야 합니다. (tests/services/test_role_catalog.py 참고)

MEMBER는 담당/본인 한정 권한(ticket.edit_assigned, comment.edit_own 등)만 가지고,
MANAGER와 ADMIN은 여기에 전체 권한(ticket.edit, comment.edit 등)을 더 가집니다.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Role(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"
    OBSERVER = "OBSERVER"


OBSERVER_PERMISSIONS: Tuple[str, ...] = (
    "project.view",
    "ticket.view",
    "comment.view",
    "audit.view",
)

MEMBER_PERMISSIONS: Tuple[str, ...] = (
    "project.view",
    "ticket.view",
    "ticket.edit_assigned",
    "ticket.change_status_assigned",
    "comment.view",
    "comment.create",
    "comment.edit_own",
    "comment.delete_own",
    "checklist.complete",
    "attachment.upload",
    "audit.view",
)

MANAGER_PERMISSIONS: Tuple[str, ...] = (
    "project.view",
    "project.edit",
    "ticket.view",
    "ticket.create",
    "ticket.edit",
    "ticket.edit_assigned",
    "ticket.assign",
    "ticket.change_status",
    "ticket.change_status_assigned",
    "comment.view",
    "comment.create",
    "comment.edit",
    "comment.edit_own",
    "comment.delete",
    "comment.delete_own",
    "label.create",
    "label.edit",
    "checklist.create",
    "checklist.edit",
    "checklist.complete",
    "attachment.upload",
    "audit.view",
)

ADMIN_PERMISSIONS: Tuple[str, ...] = (
    "project.view",
    "project.edit",
    "project.delete",
    "project.manage_members",
    "project.manage_roles",
    "ticket.view",
    "ticket.create",
    "ticket.edit",
    "ticket.edit_assigned",
    "ticket.delete",
    "ticket.assign",
    "ticket.change_status",
    "ticket.change_status_assigned",
    "comment.view",
    "comment.create",
    "comment.edit",
    "comment.edit_own",
    "comment.delete",
    "comment.delete_own",
    "label.create",
    "label.edit",
    "label.delete",
    "checklist.create",
    "checklist.edit",
    "checklist.delete",
    "checklist.complete",
    "attachment.upload",
    "attachment.delete",
    "audit.view",
    "audit.export",
    "audit.delete",
)

ROLE_PERMISSIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    Role.ADMIN.value: ADMIN_PERMISSIONS,
    Role.MANAGER.value: MANAGER_PERMISSIONS,
    Role.MEMBER.value: MEMBER_PERMISSIONS,
    Role.OBSERVER.value: OBSERVER_PERMISSIONS,
})


def is_known_role(role: str) -> bool:
    return role in ROLE_PERMISSIONS


def permissions_for_role(role: str) -> Tuple[str, ...]:
    """역할에 해당하는 권한 목록을 반환합니다. 알 수 없는 역할이면 빈 튜플을 반환합니다."""
    return ROLE_PERMISSIONS.get(role, ())
