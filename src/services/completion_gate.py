from typing import Tuple

from src.repositories.interfaces import ITicketRepository
from src.services.dependency_service import DependencyService
from src.services.exceptions import TicketNotFoundError
from src.services.permission_service import PermissionService


class CompletionGate:
    """
    티켓을 DONE으로 전환할 수 있는지 판정하는 정책 객체.

    권한 판정(PermissionService)과 의존성 판정(DependencyService)이 만나는 유일한 지점입니다.
    두 서비스는 서로를 알지 못하며, 여기서만 조합됩니다.
    """

    def __init__(self, permission_service: PermissionService, dependency_service: DependencyService, ticket_repo: ITicketRepository):
        self.permission_service = permission_service
        self.dependency_service = dependency_service
        self.ticket_repo = ticket_repo

    def can_transition_to_done(self, project_id: int, user_id: int, ticket_id: int) -> Tuple[bool, str]:
        """
        사용자가 티켓을 DONE으로 옮길 수 있는지 판정합니다.

        판정 순서:
        1. 티켓이 없으면 TicketNotFoundError.
        2. 티켓이 다른 프로젝트에 속하면 차단 여부를 보지 않고 거부합니다.
        3. 차단된 티켓은 권한과 관계없이 차단 사유와 함께 거부됩니다.
        4. 상태 변경 권한(ticket.change_status, 또는 담당자인 경우
           ticket.change_status_assigned)이 없으면 거부합니다.

        Returns:
            (허용 여부, 사유) 튜플. 허용된 경우 사유는 빈 문자열입니다.

        Raises:
            TicketNotFoundError: 해당 ID의 티켓을 찾을 수 없을 때.
        """
        ticket = self.ticket_repo.find_by_id(ticket_id)
        if not ticket:
            raise TicketNotFoundError(f"Ticket with id '{ticket_id}' not found.")
        if ticket.project_id != project_id:
            return False, f"Ticket '{ticket_id}' does not belong to project '{project_id}'."

        reason = self.dependency_service.blocking_reason(ticket_id)
        if reason is not None:
            return False, reason

        if not self.permission_service.can_change_ticket_status(project_id, user_id, ticket.assignee_ids):
            return False, f"User '{user_id}' is not allowed to change the status of ticket '{ticket_id}'."

        return True, ""
