import logging
from datetime import datetime
from typing import List, Optional

from src.database import models
from src.repositories.interfaces import (
    IProjectRepository, IUserRepository, IMembershipRepository
)
from src.services.role_catalog import Role, is_known_role, permissions_for_role
from src.services.exceptions import (
    ProjectNotFoundError, UserNotFoundError, MembershipNotFoundError,
    MembershipConflictError, UnknownRoleError, InvalidStatusError
)

logger = logging.getLogger(__name__)

MEMBERSHIP_STATUSES = ("ACTIVE", "INVITED", "SUSPENDED")


class PermissionService:
    """
    "사용자 U가 프로젝트 J에서 권한 P를 행사할 수 있는가"에 대한 단일한 판정과
    프로젝트 멤버십(역할 부여/변경/회수)을 관리합니다.

    권한 판정은 순수한 술어(predicate)입니다. 접근 거부는 예외가 아니라 False로 반환되며,
    존재하지 않는 프로젝트나 멤버십 역시 "권한 없음"으로 취급합니다.
    """

    def __init__(self, project_repo: IProjectRepository, user_repo: IUserRepository, membership_repo: IMembershipRepository):
        """
        PermissionService를 초기화합니다.

        Args:
            project_repo: 프로젝트 소유자/관리자 정보를 조회하기 위한 리포지토리.
            user_repo: 사용자 존재 여부를 확인하기 위한 리포지토리.
            membership_repo: 멤버십 데이터에 접근하기 위한 리포지토리.
        """
        self.project_repo = project_repo
        self.user_repo = user_repo
        self.membership_repo = membership_repo

    # ------------------------------------------------------------------
    # 권한 판정
    # ------------------------------------------------------------------

    def has_permission(self, project_id: int, user_id: int, permission: str) -> bool:
        """
        사용자가 프로젝트 내에서 특정 권한을 가지는지 판정합니다.

        1. 프로젝트가 없으면 False.
        2. 프로젝트 소유자 또는 관리자이면 멤버십과 무관하게 항상 True.
        3. 멤버십이 없거나 ACTIVE 상태가 아니면 False.
        4. 멤버십에 복사된 권한 목록에 permission이 포함되어 있으면 True.
        """
        project = self.project_repo.find_by_id(project_id)
        if not project:
            return False
        if project.owner_id == user_id or user_id in project.admin_ids:
            return True

        membership = self.membership_repo.find_by_project_and_user(project_id, user_id)
        if not membership or membership.status != "ACTIVE":
            return False
        return membership.has_permission(permission)

    def can_view_project(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "project.view")

    def can_edit_project(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "project.edit")

    def can_delete_project(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "project.delete")

    def can_manage_members(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "project.manage_members")

    def can_create_ticket(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "ticket.create")

    def can_edit_ticket(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "ticket.edit")

    def can_edit_assigned_ticket(self, project_id: int, user_id: int, assignee_ids: List[int]) -> bool:
        """전체 편집 권한이 있거나, 담당 티켓 편집 권한이 있으면서 담당자로 지정된 경우 True."""
        if self.has_permission(project_id, user_id, "ticket.edit"):
            return True
        return self.has_permission(project_id, user_id, "ticket.edit_assigned") and user_id in assignee_ids

    def can_delete_ticket(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "ticket.delete")

    def can_assign_ticket(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "ticket.assign")

    def can_change_ticket_status(self, project_id: int, user_id: int, assignee_ids: List[int]) -> bool:
        """전체 상태 변경 권한이 있거나, 담당 티켓 상태 변경 권한이 있으면서 담당자로 지정된 경우 True."""
        if self.has_permission(project_id, user_id, "ticket.change_status"):
            return True
        return self.has_permission(project_id, user_id, "ticket.change_status_assigned") and user_id in assignee_ids

    def can_create_comment(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "comment.create")

    def can_edit_comment(self, project_id: int, user_id: int, comment_author_id: int) -> bool:
        if self.has_permission(project_id, user_id, "comment.edit"):
            return True
        return self.has_permission(project_id, user_id, "comment.edit_own") and comment_author_id == user_id

    def can_delete_comment(self, project_id: int, user_id: int, comment_author_id: int) -> bool:
        if self.has_permission(project_id, user_id, "comment.delete"):
            return True
        return self.has_permission(project_id, user_id, "comment.delete_own") and comment_author_id == user_id

    def can_view_audit(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "audit.view")

    def can_delete_audit(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "audit.delete")

    def can_upload_attachment(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "attachment.upload")

    def can_complete_checklist(self, project_id: int, user_id: int) -> bool:
        return self.has_permission(project_id, user_id, "checklist.complete")

    def can_manage_dependencies(self, project_id: int, user_id: int) -> bool:
        # 의존성 간선 생성/삭제는 티켓 전체 편집 권한을 요구합니다.
        return self.has_permission(project_id, user_id, "ticket.edit")

    # ------------------------------------------------------------------
    # 멤버십 관리
    # ------------------------------------------------------------------

    def get_membership(self, project_id: int, user_id: int) -> Optional[models.ProjectMembership]:
        return self.membership_repo.find_by_project_and_user(project_id, user_id)

    def get_user_role(self, project_id: int, user_id: int) -> Optional[str]:
        """
        프로젝트 내 사용자의 역할 이름을 반환합니다. 소유자는 항상 ADMIN입니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
        """
        project = self.project_repo.find_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")
        if project.owner_id == user_id:
            return Role.ADMIN.value

        membership = self.membership_repo.find_by_project_and_user(project_id, user_id)
        return membership.role if membership else None

    def list_project_members(self, project_id: int) -> List[models.ProjectMembership]:
        """
        프로젝트의 ACTIVE 멤버십 목록을 가입 순으로 조회합니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
        """
        if not self.project_repo.find_by_id(project_id):
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")
        return self.membership_repo.list_by_project(project_id, status="ACTIVE")

    def assign_role(self, project_id: int, user_id: int, role: str, invited_by: Optional[int] = None) -> models.ProjectMembership:
        """
        사용자를 프로젝트에 추가하고 역할을 부여합니다.

        권한 목록은 이 시점의 역할 카탈로그에서 복사되어 멤버십에 저장됩니다.
        이미 멤버십이 있는 사용자의 역할을 바꾸려면 update_role을 사용해야 합니다.

        Raises:
            UnknownRoleError: 역할 카탈로그에 없는 역할일 때.
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
            UserNotFoundError: 대상 사용자 또는 초대한 사용자를 찾을 수 없을 때.
            MembershipConflictError: 해당 사용자가 이미 프로젝트 멤버일 때.
        """
        if not is_known_role(role):
            raise UnknownRoleError(f"Role '{role}' not found.")
        role = Role(role).value

        if not self.project_repo.find_by_id(project_id):
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")
        if not self.user_repo.exists(user_id):
            raise UserNotFoundError(f"User with id '{user_id}' not found.")
        if invited_by is not None and not self.user_repo.exists(invited_by):
            raise UserNotFoundError(f"User with id '{invited_by}' not found.")

        if self.membership_repo.find_by_project_and_user(project_id, user_id):
            raise MembershipConflictError(f"User '{user_id}' is already a member of project '{project_id}'.")

        membership = models.ProjectMembership(
            project_id=project_id,
            user_id=user_id,
            role=role,
            permissions=list(permissions_for_role(role)),
            status="ACTIVE",
            invited_by=invited_by,
        )
        # 사전 검사 이후 동시에 생성된 멤버십은 리포지토리의 유일성 제약이 걸러냅니다.
        created = self.membership_repo.create(membership)
        logger.info("Assigned role %s to user %s in project %s", role, user_id, project_id)
        return created

    def update_role(self, project_id: int, user_id: int, new_role: str) -> models.ProjectMembership:
        """
        멤버십의 역할을 변경하고 권한 목록을 카탈로그에서 다시 복사합니다.

        기존 권한 목록은 덧붙이지 않고 통째로 교체되므로, 카탈로그 밖에서 개별적으로
        부여된 권한은 역할 변경 시 사라집니다.

        Raises:
            UnknownRoleError: 역할 카탈로그에 없는 역할일 때.
            MembershipNotFoundError: 해당 사용자의 멤버십이 없을 때.
        """
        if not is_known_role(new_role):
            raise UnknownRoleError(f"Role '{new_role}' not found.")

        membership = self.membership_repo.find_by_project_and_user(project_id, user_id)
        if not membership:
            raise MembershipNotFoundError(f"User '{user_id}' has no role in project '{project_id}'.")

        membership.role = Role(new_role).value
        membership.permissions = list(permissions_for_role(membership.role))
        membership.updated_at = datetime.now()
        saved = self.membership_repo.save(membership)
        logger.info("Updated role of user %s in project %s to %s", user_id, project_id, membership.role)
        return saved

    def set_membership_status(self, project_id: int, user_id: int, status: str) -> models.ProjectMembership:
        """
        멤버십 상태를 변경합니다. ACTIVE가 아닌 멤버십은 어떤 권한도 행사할 수 없습니다.

        Raises:
            InvalidStatusError: 지원하지 않는 상태일 때.
            MembershipNotFoundError: 해당 사용자의 멤버십이 없을 때.
        """
        if status not in MEMBERSHIP_STATUSES:
            raise InvalidStatusError(f"Membership status '{status}' is not supported.")

        membership = self.membership_repo.find_by_project_and_user(project_id, user_id)
        if not membership:
            raise MembershipNotFoundError(f"User '{user_id}' has no role in project '{project_id}'.")

        membership.status = status
        membership.updated_at = datetime.now()
        return self.membership_repo.save(membership)

    def remove_user_from_project(self, project_id: int, user_id: int) -> bool:
        """
        사용자를 프로젝트에서 제거합니다. 멤버십은 물리적으로 삭제됩니다.
        프로젝트 소유자/관리자 지위는 멤버십과 별개이므로 영향을 받지 않습니다.

        Raises:
            MembershipNotFoundError: 해당 사용자의 멤버십이 없을 때.
        """
        membership = self.membership_repo.find_by_project_and_user(project_id, user_id)
        if not membership:
            raise MembershipNotFoundError(f"User '{user_id}' has no role in project '{project_id}'.")
        self.membership_repo.delete(membership)
        logger.info("Removed user %s from project %s", user_id, project_id)
        return True
