import logging
from collections import deque
from datetime import datetime
from typing import List, Optional

from src.config import BlockingPolicy, CycleDetection
from src.database import models
from src.repositories.interfaces import (
    IDependencyRepository, ITicketRepository, IUserRepository, IProjectRepository
)
from src.services.exceptions import (
    ProjectNotFoundError, TicketNotFoundError, UserNotFoundError, DependencyNotFoundError,
    DependencyAlreadyExistsError, CircularDependencyError,
    SelfDependencyError, InvalidRelationshipTypeError, CrossProjectDependencyError
)

logger = logging.getLogger(__name__)

RELATIONSHIP_TYPES = ("BLOCKING", "BLOCKED_BY", "RELATED_TO")
DONE_STATUS = "DONE"


class DependencyService:
    """
    티켓 간 의존성 그래프를 관리하고, 티켓이 완료될 수 있는지(차단 여부)를 판정합니다.

    이 서비스는 권한 개념을 알지 못합니다. 권한 확인은 호출자(또는 CompletionGate)의 몫입니다.
    """

    def __init__(
        self,
        dependency_repo: IDependencyRepository,
        ticket_repo: ITicketRepository,
        user_repo: IUserRepository,
        project_repo: IProjectRepository,
        cycle_detection: CycleDetection = CycleDetection.TRANSITIVE,
        blocking_policy: BlockingPolicy = BlockingPolicy.OPEN_DEPENDENCIES,
    ):
        """
        DependencyService를 초기화합니다.

        Args:
            dependency_repo: 의존성 간선 데이터에 접근하기 위한 리포지토리.
            ticket_repo: 티켓의 소속 프로젝트와 상태를 조회하기 위한 리포지토리.
            user_repo: 간선 생성자의 존재 여부를 확인하기 위한 리포지토리.
            project_repo: 간선이 속할 프로젝트의 존재 여부를 확인하기 위한 리포지토리.
            cycle_detection: 순환 검사 정책. DIRECT는 역방향 간선만 검사하는 레거시 동작입니다.
            blocking_policy: 차단 판정 정책. ANY_ACTIVE_EDGE는 선행 티켓 상태를 보지 않는 레거시 동작입니다.
        """
        self.dependency_repo = dependency_repo
        self.ticket_repo = ticket_repo
        self.user_repo = user_repo
        self.project_repo = project_repo
        self.cycle_detection = CycleDetection(cycle_detection)
        self.blocking_policy = BlockingPolicy(blocking_policy)

    # ------------------------------------------------------------------
    # 간선 생성/변경/삭제
    # ------------------------------------------------------------------

    def create_dependency(
        self,
        dependent_ticket_id: int,
        depends_on_ticket_id: int,
        project_id: int,
        relationship_type: str = "BLOCKING",
        created_by: Optional[int] = None,
        description: Optional[str] = None,
    ) -> models.TaskDependency:
        """
        dependent 티켓이 depends_on 티켓에 의존하도록 간선을 생성합니다.

        Raises:
            SelfDependencyError: 두 티켓이 같을 때.
            InvalidRelationshipTypeError: 지원하지 않는 관계 종류일 때.
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
            TicketNotFoundError: 두 티켓 중 하나를 찾을 수 없을 때.
            CrossProjectDependencyError: 두 티켓 중 하나가 다른 프로젝트에 속할 때.
            UserNotFoundError: 생성자를 찾을 수 없을 때.
            DependencyAlreadyExistsError: 같은 순서쌍의 간선이 이미 있을 때 (비활성 간선 포함).
            CircularDependencyError: 간선이 순환을 만들 때.
        """
        if dependent_ticket_id == depends_on_ticket_id:
            raise SelfDependencyError(f"Ticket '{dependent_ticket_id}' cannot depend on itself.")
        if relationship_type not in RELATIONSHIP_TYPES:
            raise InvalidRelationshipTypeError(f"Relationship type '{relationship_type}' is not supported.")

        if not self.project_repo.find_by_id(project_id):
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")
        for ticket_id in (dependent_ticket_id, depends_on_ticket_id):
            ticket = self.ticket_repo.find_by_id(ticket_id)
            if not ticket:
                raise TicketNotFoundError(f"Ticket with id '{ticket_id}' not found.")
            if ticket.project_id != project_id:
                raise CrossProjectDependencyError(
                    f"Ticket '{ticket_id}' does not belong to project '{project_id}'."
                )
        if created_by is not None and not self.user_repo.exists(created_by):
            raise UserNotFoundError(f"User with id '{created_by}' not found.")

        if self.dependency_repo.find_by_pair(dependent_ticket_id, depends_on_ticket_id):
            raise DependencyAlreadyExistsError("Dependency already exists between these tickets.")
        if self.has_circular_dependency(dependent_ticket_id, depends_on_ticket_id):
            raise CircularDependencyError(
                f"Circular dependency detected: ticket '{depends_on_ticket_id}' already depends on '{dependent_ticket_id}'."
            )

        dependency = models.TaskDependency(
            dependent_ticket_id=dependent_ticket_id,
            depends_on_ticket_id=depends_on_ticket_id,
            project_id=project_id,
            relationship_type=relationship_type,
            description=description,
            created_by=created_by,
            active=True,
        )
        created = self.dependency_repo.create(dependency)
        logger.info("Ticket %s now depends on ticket %s", dependent_ticket_id, depends_on_ticket_id)
        return created

    def update_dependency(
        self,
        dependency_id: int,
        relationship_type: Optional[str] = None,
        description: Optional[str] = None,
    ) -> models.TaskDependency:
        """
        간선의 관계 종류나 설명을 변경합니다. None으로 전달된 값은 유지됩니다.

        Raises:
            DependencyNotFoundError: 해당 ID의 간선을 찾을 수 없을 때.
            InvalidRelationshipTypeError: 지원하지 않는 관계 종류일 때.
        """
        dependency = self.get_dependency(dependency_id)
        if relationship_type is not None:
            if relationship_type not in RELATIONSHIP_TYPES:
                raise InvalidRelationshipTypeError(f"Relationship type '{relationship_type}' is not supported.")
            dependency.relationship_type = relationship_type
        if description is not None:
            dependency.description = description
        dependency.updated_at = datetime.now()
        return self.dependency_repo.save(dependency)

    def remove_dependency(self, dependency_id: int) -> models.TaskDependency:
        """
        간선을 소프트 삭제(active=False)합니다. 간선은 ID로 계속 조회할 수 있습니다.

        Raises:
            DependencyNotFoundError: 해당 ID의 간선을 찾을 수 없을 때.
        """
        dependency = self.get_dependency(dependency_id)
        dependency.active = False
        dependency.updated_at = datetime.now()
        saved = self.dependency_repo.save(dependency)
        logger.info("Deactivated dependency %s", dependency_id)
        return saved

    def remove_dependency_between(self, dependent_ticket_id: int, depends_on_ticket_id: int) -> models.TaskDependency:
        """
        순서쌍으로 찾은 간선을 소프트 삭제합니다.

        Raises:
            DependencyNotFoundError: 해당 순서쌍의 간선이 없을 때.
        """
        dependency = self.dependency_repo.find_by_pair(dependent_ticket_id, depends_on_ticket_id)
        if not dependency:
            raise DependencyNotFoundError(
                f"No dependency from ticket '{dependent_ticket_id}' to ticket '{depends_on_ticket_id}'."
            )
        return self.remove_dependency(dependency.id)

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------

    def get_dependency(self, dependency_id: int) -> models.TaskDependency:
        """
        ID로 간선을 조회합니다. 소프트 삭제된 간선도 반환됩니다.

        Raises:
            DependencyNotFoundError: 해당 ID의 간선을 찾을 수 없을 때.
        """
        dependency = self.dependency_repo.find_by_id(dependency_id)
        if not dependency:
            raise DependencyNotFoundError(f"Dependency with id '{dependency_id}' not found.")
        return dependency

    def get_depends_on(self, ticket_id: int) -> List[models.TaskDependency]:
        """이 티켓이 의존하는 활성 간선 목록."""
        return self.dependency_repo.list_by_dependent(ticket_id, active=True)

    def get_dependents(self, ticket_id: int) -> List[models.TaskDependency]:
        """이 티켓에 의존하는(이 티켓이 막고 있는) 활성 간선 목록."""
        return self.dependency_repo.list_by_depends_on(ticket_id, active=True)

    def get_project_dependencies(self, project_id: int) -> List[models.TaskDependency]:
        return self.dependency_repo.list_by_project(project_id, active=True)

    def count_dependencies(self, ticket_id: int) -> int:
        return self.dependency_repo.count_by_dependent(ticket_id)

    def count_dependents(self, ticket_id: int) -> int:
        return self.dependency_repo.count_by_depends_on(ticket_id)

    # ------------------------------------------------------------------
    # 그래프 판정
    # ------------------------------------------------------------------

    def has_circular_dependency(self, dependent_ticket_id: int, depends_on_ticket_id: int) -> bool:
        """
        dependent -> depends_on 간선을 추가했을 때 순환이 생기는지 검사합니다.

        TRANSITIVE: depends_on에서 활성 간선을 따라 dependent에 도달할 수 있으면 순환입니다.
        DIRECT: depends_on -> dependent 역방향 간선이 (활성 여부와 무관하게) 존재할 때만 순환입니다.
        """
        if self.cycle_detection == CycleDetection.DIRECT:
            return self.dependency_repo.find_by_pair(depends_on_ticket_id, dependent_ticket_id) is not None

        visited = {depends_on_ticket_id}
        queue = deque([depends_on_ticket_id])
        while queue:
            current = queue.popleft()
            for edge in self.dependency_repo.list_by_dependent(current, active=True):
                next_ticket = edge.depends_on_ticket_id
                if next_ticket == dependent_ticket_id:
                    return True
                if next_ticket not in visited:
                    visited.add(next_ticket)
                    queue.append(next_ticket)
        return False

    def get_blocking_dependencies(self, ticket_id: int) -> List[models.TaskDependency]:
        """
        현재 이 티켓을 막고 있는 활성 간선 목록을 차단 정책에 따라 반환합니다.

        OPEN_DEPENDENCIES 정책에서는 선행 티켓이 DONE이면 차단하지 않습니다.
        선행 티켓을 찾을 수 없으면 완료 여부를 알 수 없으므로 계속 차단합니다.
        """
        edges = self.get_depends_on(ticket_id)
        if self.blocking_policy == BlockingPolicy.ANY_ACTIVE_EDGE or not edges:
            return edges

        statuses = self.ticket_repo.get_statuses(edge.depends_on_ticket_id for edge in edges)
        return [edge for edge in edges if statuses.get(edge.depends_on_ticket_id) != DONE_STATUS]

    def is_blocked(self, ticket_id: int) -> bool:
        return len(self.get_blocking_dependencies(ticket_id)) > 0

    def can_be_completed(self, ticket_id: int) -> bool:
        return not self.is_blocked(ticket_id)

    def blocking_reason(self, ticket_id: int) -> Optional[str]:
        """
        차단 사유를 "Blocked by: 3, 7" 형식으로 반환합니다. 차단되지 않았으면 None.
        나열 순서는 리포지토리 조회 순서를 따르며 안정성이 보장되지 않습니다.
        """
        blockers = self.get_blocking_dependencies(ticket_id)
        if not blockers:
            return None
        return "Blocked by: " + ", ".join(str(edge.depends_on_ticket_id) for edge in blockers)
