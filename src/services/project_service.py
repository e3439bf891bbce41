import logging
from typing import Any, Dict, List, Optional

from src.database import models
from src.repositories.interfaces import IProjectRepository, IUserRepository
from src.services.exceptions import (
    ProjectCreationError, UserCreationError, ProjectNotFoundError, UserNotFoundError
)

logger = logging.getLogger(__name__)


class ProjectService:
    """프로젝트와 사용자, 그리고 프로젝트의 소유자/관리자 지위를 관리합니다."""

    def __init__(self, user_repo: IUserRepository, project_repo: IProjectRepository):
        """
        ProjectService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            project_repo: 프로젝트 데이터에 접근하기 위한 리포지토리.
        """
        self.user_repo = user_repo
        self.project_repo = project_repo

    def create_user(self, username: str, email: Optional[str] = None) -> Dict[str, Any]:
        """
        새로운 사용자를 생성합니다.

        Raises:
            UserCreationError: 동일한 이름의 사용자가 이미 존재할 때.
        """
        if self.user_repo.find_by_username(username):
            raise UserCreationError(f"User with username '{username}' already exists.")
        created_user = self.user_repo.create(models.User(username=username, email=email))
        return {"id": created_user.id, "username": created_user.username}

    def get_user(self, user_id: int) -> Dict[str, Any]:
        """
        ID로 특정 사용자를 조회합니다.

        Raises:
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User with id '{user_id}' not found.")
        return {"id": user.id, "username": user.username, "email": user.email}

    def create_project(self, name: str, owner_id: int, description: Optional[str] = None) -> Dict[str, Any]:
        """
        새로운 프로젝트를 생성합니다. 생성한 사용자가 소유자가 됩니다.

        Raises:
            UserNotFoundError: 소유자로 지정된 사용자를 찾을 수 없을 때.
            ProjectCreationError: 동일한 이름의 프로젝트가 이미 존재할 때.
        """
        if not self.user_repo.exists(owner_id):
            raise UserNotFoundError(f"User with id '{owner_id}' not found.")
        if self.project_repo.find_by_name(name):
            raise ProjectCreationError(f"Project with name '{name}' already exists.")
        new_project = models.Project(name=name, description=description, owner_id=owner_id, status="ACTIVE")
        created_project = self.project_repo.create(new_project)
        logger.info("Created project %s owned by user %s", created_project.id, owner_id)
        return {"id": created_project.id, "name": created_project.name, "owner_id": created_project.owner_id}

    def list_projects(self) -> List[Dict[str, Any]]:
        """모든 프로젝트의 목록을 조회합니다."""
        projects = self.project_repo.list_all()
        return [{"id": p.id, "name": p.name, "owner_id": p.owner_id} for p in projects]

    def get_project(self, project_id: int) -> Dict[str, Any]:
        """
        ID로 특정 프로젝트를 조회합니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
        """
        project = self._find_project(project_id)
        return {
            "id": project.id,
            "name": project.name,
            "description": project.description,
            "status": project.status,
            "owner_id": project.owner_id,
            "admin_ids": project.admin_ids,
        }

    def delete_project(self, project_id: int) -> bool:
        """
        프로젝트를 삭제합니다. 멤버십, 티켓, 의존성 간선이 함께 삭제됩니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
        """
        project = self._find_project(project_id)
        self.project_repo.delete(project)
        logger.info("Deleted project %s", project_id)
        return True

    def add_admin(self, project_id: int, user_id: int) -> List[int]:
        """
        프로젝트 관리자 목록에 사용자를 추가하고, 갱신된 관리자 ID 목록을 반환합니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        project = self._find_project(project_id)
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User with id '{user_id}' not found.")
        self.project_repo.add_admin(project, user)
        return project.admin_ids

    def remove_admin(self, project_id: int, user_id: int) -> List[int]:
        """
        프로젝트 관리자 목록에서 사용자를 제거하고, 갱신된 관리자 ID 목록을 반환합니다.

        Raises:
            ProjectNotFoundError: 해당 ID의 프로젝트를 찾을 수 없을 때.
            UserNotFoundError: 해당 ID의 사용자를 찾을 수 없을 때.
        """
        project = self._find_project(project_id)
        user = self.user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User with id '{user_id}' not found.")
        self.project_repo.remove_admin(project, user)
        return project.admin_ids

    def _find_project(self, project_id: int) -> models.Project:
        project = self.project_repo.find_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(f"Project with id '{project_id}' not found.")
        return project
