from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IProjectRepository(ABC):
    @abstractmethod
    def create(self, project_model: models.Project) -> models.Project:
        """새로운 프로젝트를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[models.Project]:
        """고유 ID로 특정 프로젝트를 조회합니다."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.Project]:
        """이름으로 특정 프로젝트를 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Project]:
        """모든 프로젝트의 목록을 조회합니다."""
        pass

    @abstractmethod
    def delete(self, project: models.Project) -> bool:
        """
        특정 프로젝트를 데이터베이스에서 삭제합니다.
        프로젝트에 속한 멤버십, 티켓, 의존성 간선도 함께 삭제됩니다.
        """
        pass

    @abstractmethod
    def add_admin(self, project: models.Project, user: models.User):
        """프로젝트 관리자 목록에 사용자를 추가합니다. 이미 관리자이면 무시합니다."""
        pass

    @abstractmethod
    def remove_admin(self, project: models.Project, user: models.User):
        """프로젝트 관리자 목록에서 사용자를 제거합니다."""
        pass
