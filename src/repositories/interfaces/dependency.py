from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IDependencyRepository(ABC):
    @abstractmethod
    def create(self, dependency: models.TaskDependency) -> models.TaskDependency:
        """
        새로운 의존성 간선을 생성합니다.

        Raises:
            DependencyAlreadyExistsError: 동일한 순서쌍의 간선이 이미 존재할 때.
                사전 검사와 무관하게 유일성 제약이 최종적인 보증입니다.
            IntegrityError: 그 밖의 무결성 제약 위반. 롤백 후 그대로 전달됩니다.
        """
        pass

    @abstractmethod
    def find_by_id(self, dependency_id: int) -> Optional[models.TaskDependency]:
        """고유 ID로 간선을 조회합니다. 비활성(소프트 삭제된) 간선도 조회됩니다."""
        pass

    @abstractmethod
    def find_by_pair(self, dependent_ticket_id: int, depends_on_ticket_id: int) -> Optional[models.TaskDependency]:
        """순서쌍으로 간선을 조회합니다. 활성 여부와 관계없이 조회됩니다."""
        pass

    @abstractmethod
    def list_by_dependent(self, ticket_id: int, active: bool = True) -> List[models.TaskDependency]:
        """ticket_id가 의존하는 간선들(이 티켓을 막고 있는 것들)을 조회합니다."""
        pass

    @abstractmethod
    def list_by_depends_on(self, ticket_id: int, active: bool = True) -> List[models.TaskDependency]:
        """ticket_id에 의존하는 간선들(이 티켓이 막고 있는 것들)을 조회합니다."""
        pass

    @abstractmethod
    def list_by_project(self, project_id: int, active: bool = True) -> List[models.TaskDependency]:
        """프로젝트에 속한 간선들을 조회합니다."""
        pass

    @abstractmethod
    def save(self, dependency: models.TaskDependency) -> models.TaskDependency:
        """변경된 간선(관계 종류, 설명, 활성 여부)을 저장합니다."""
        pass

    @abstractmethod
    def count_by_dependent(self, ticket_id: int) -> int:
        """ticket_id가 의존하는 활성 간선의 수를 조회합니다."""
        pass

    @abstractmethod
    def count_by_depends_on(self, ticket_id: int) -> int:
        """ticket_id에 의존하는 활성 간선의 수를 조회합니다."""
        pass
