# tests/services/test_project_service.py
import pytest
from unittest.mock import MagicMock, ANY

from src.services.project_service import ProjectService
from src.services.exceptions import *
from src.repositories.interfaces import IUserRepository, IProjectRepository
from src.database import models

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def mock_user_repo() -> MagicMock:
    """IUserRepository에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=IUserRepository)

@pytest.fixture
def mock_project_repo() -> MagicMock:
    """IProjectRepository에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=IProjectRepository)

@pytest.fixture
def project_service(mock_user_repo: MagicMock, mock_project_repo: MagicMock) -> ProjectService:
    """테스트에 사용될 ProjectService 인스턴스를 생성하고, 의존성을 주입합니다."""
    return ProjectService(mock_user_repo, mock_project_repo)

# ===================================================================
#  프로젝트 관리(Project Management) 테스트
# ===================================================================
class TestProjectManagement:
    def test_create_project_success(self, project_service: ProjectService, mock_user_repo: MagicMock, mock_project_repo: MagicMock):
        """프로젝트 생성 성공 시나리오를 테스트합니다."""
        # === Arrange (테스트 준비) ===
        project_name = "new-project"
        # 시나리오: 소유자가 존재하고 프로젝트 이름이 중복되지 않음
        mock_user_repo.exists.return_value = True
        mock_project_repo.find_by_name.return_value = None
        mock_project_repo.create.return_value = models.Project(id=5, name=project_name, owner_id=3)

        # === Act (실제 테스트 대상 실행) ===
        project = project_service.create_project(project_name, owner_id=3)

        # === Assert (결과 검증) ===
        assert project == {"id": 5, "name": project_name, "owner_id": 3}
        mock_project_repo.find_by_name.assert_called_once_with(project_name)
        mock_project_repo.create.assert_called_once_with(ANY) # models.Project 객체

    def test_create_project_fails_if_name_exists(self, project_service: ProjectService, mock_user_repo: MagicMock, mock_project_repo: MagicMock):
        """프로젝트 이름이 중복될 경우 ProjectCreationError가 발생하는지 테스트합니다."""
        # === Arrange ===
        mock_user_repo.exists.return_value = True
        mock_project_repo.find_by_name.return_value = models.Project(id=1, name="existing-project", owner_id=1)

        # === Act & Assert ===
        with pytest.raises(ProjectCreationError):
            project_service.create_project("existing-project", owner_id=3)
        # 검증: create는 호출되지 않았어야 함
        mock_project_repo.create.assert_not_called()

    def test_create_project_fails_without_owner(self, project_service: ProjectService, mock_user_repo: MagicMock, mock_project_repo: MagicMock):
        mock_user_repo.exists.return_value = False

        with pytest.raises(UserNotFoundError):
            project_service.create_project("orphan", owner_id=404)
        mock_project_repo.create.assert_not_called()

    def test_get_project_includes_admins(self, project_service: ProjectService, mock_project_repo: MagicMock):
        mock_project_repo.find_by_id.return_value = models.Project(
            id=2, name="tracker", owner_id=1, status="ACTIVE",
            admins=[models.User(id=7, username="ops")]
        )

        project = project_service.get_project(2)

        assert project["owner_id"] == 1
        assert project["admin_ids"] == [7]

    def test_delete_project_success(self, project_service: ProjectService, mock_project_repo: MagicMock):
        """프로젝트 삭제 성공을 테스트합니다."""
        # === Arrange ===
        mock_project = models.Project(id=2, name="old-project", owner_id=1)
        mock_project_repo.find_by_id.return_value = mock_project

        # === Act ===
        result = project_service.delete_project(2)

        # === Assert ===
        assert result is True
        mock_project_repo.delete.assert_called_once_with(mock_project)

    def test_delete_missing_project(self, project_service: ProjectService, mock_project_repo: MagicMock):
        mock_project_repo.find_by_id.return_value = None

        with pytest.raises(ProjectNotFoundError):
            project_service.delete_project(404)
        mock_project_repo.delete.assert_not_called()

# ===================================================================
#  관리자 지정(Admin) 테스트
# ===================================================================
class TestProjectAdmins:
    def test_add_admin(self, project_service: ProjectService, mock_user_repo: MagicMock, mock_project_repo: MagicMock):
        # === Arrange ===
        project = models.Project(id=2, name="tracker", owner_id=1)
        user = models.User(id=9, username="lead")
        mock_project_repo.find_by_id.return_value = project
        mock_user_repo.find_by_id.return_value = user

        # === Act ===
        project_service.add_admin(2, 9)

        # === Assert ===
        mock_project_repo.add_admin.assert_called_once_with(project, user)

    def test_add_unknown_user_as_admin(self, project_service: ProjectService, mock_user_repo: MagicMock, mock_project_repo: MagicMock):
        mock_project_repo.find_by_id.return_value = models.Project(id=2, name="tracker", owner_id=1)
        mock_user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            project_service.add_admin(2, 404)
        mock_project_repo.add_admin.assert_not_called()

    def test_remove_admin(self, project_service: ProjectService, mock_user_repo: MagicMock, mock_project_repo: MagicMock):
        project = models.Project(id=2, name="tracker", owner_id=1)
        user = models.User(id=9, username="lead")
        mock_project_repo.find_by_id.return_value = project
        mock_user_repo.find_by_id.return_value = user

        project_service.remove_admin(2, 9)

        mock_project_repo.remove_admin.assert_called_once_with(project, user)

# ===================================================================
#  사용자 관리(User Management) 테스트
# ===================================================================
class TestUserManagement:
    def test_create_user_success(self, project_service: ProjectService, mock_user_repo: MagicMock):
        """사용자 생성 성공 시나리오를 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.create.return_value = models.User(id=10, username="testuser")

        # === Act ===
        user = project_service.create_user("testuser", "test@example.com")

        # === Assert ===
        assert user == {"id": 10, "username": "testuser"}
        mock_user_repo.create.assert_called_once_with(ANY) # models.User 객체

    def test_create_user_fails_if_username_exists(self, project_service: ProjectService, mock_user_repo: MagicMock):
        mock_user_repo.find_by_username.return_value = models.User(id=1, username="testuser")

        with pytest.raises(UserCreationError):
            project_service.create_user("testuser")
        mock_user_repo.create.assert_not_called()

    def test_get_missing_user(self, project_service: ProjectService, mock_user_repo: MagicMock):
        mock_user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            project_service.get_user(404)
