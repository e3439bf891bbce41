from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IMembershipRepository(ABC):
    @abstractmethod
    def create(self, membership: models.ProjectMembership) -> models.ProjectMembership:
        """
        새로운 멤버십을 생성합니다.

        Raises:
            MembershipConflictError: 동일한 (project_id, user_id) 멤버십이 이미 존재할 때.
                동시에 들어온 두 요청 중 늦은 쪽은 유일성 제약에 의해 이 예외를 받습니다.
            IntegrityError: 그 밖의 무결성 제약 위반. 롤백 후 그대로 전달됩니다.
        """
        pass

    @abstractmethod
    def find_by_project_and_user(self, project_id: int, user_id: int) -> Optional[models.ProjectMembership]:
        """(프로젝트, 사용자) 쌍으로 멤버십을 조회합니다."""
        pass

    @abstractmethod
    def list_by_project(self, project_id: int, status: Optional[str] = None) -> List[models.ProjectMembership]:
        """프로젝트의 멤버십 목록을 가입 순으로 조회합니다. status가 주어지면 해당 상태만 조회합니다."""
        pass

    @abstractmethod
    def save(self, membership: models.ProjectMembership) -> models.ProjectMembership:
        """변경된 멤버십을 저장합니다."""
        pass

    @abstractmethod
    def delete(self, membership: models.ProjectMembership) -> bool:
        """멤버십을 데이터베이스에서 삭제합니다."""
        pass
