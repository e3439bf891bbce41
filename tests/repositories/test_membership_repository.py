# tests/repositories/test_membership_repository.py
import pytest

from sqlalchemy.exc import IntegrityError

from src.database import models
from src.repositories.sqlalchemy import SqlalchemyMembershipRepository, SqlalchemyProjectRepository
from src.services.exceptions import MembershipConflictError
from src.services.role_catalog import MEMBER_PERMISSIONS


def new_membership(project, user, role="MEMBER"):
    return models.ProjectMembership(
        project_id=project.id, user_id=user.id, role=role,
        permissions=list(MEMBER_PERMISSIONS), status="ACTIVE"
    )


class TestMembershipRepository:
    def test_create_and_find(self, db_session, seed):
        repo = SqlalchemyMembershipRepository(db_session)

        created = repo.create(new_membership(seed["project"], seed["member"]))
        found = repo.find_by_project_and_user(seed["project"].id, seed["member"].id)

        assert found.id == created.id
        assert found.permissions == list(MEMBER_PERMISSIONS)
        assert found.joined_at is not None

    def test_unique_constraint_rejects_second_membership(self, db_session, seed):
        """사전 검사 없이 두 번 저장해도 (project, user) 유일성 제약이 두 번째를 거부합니다."""
        repo = SqlalchemyMembershipRepository(db_session)
        repo.create(new_membership(seed["project"], seed["member"]))

        with pytest.raises(MembershipConflictError):
            repo.create(new_membership(seed["project"], seed["member"], role="MANAGER"))

        # 검증: 롤백 후 세션은 계속 사용 가능하고 기존 멤버십은 그대로
        memberships = repo.list_by_project(seed["project"].id)
        assert len(memberships) == 1
        assert memberships[0].role == "MEMBER"

    def test_other_integrity_errors_are_not_conflicts(self, db_session, seed):
        """유일성 제약이 아닌 NOT NULL 위반은 Conflict로 바뀌지 않고 그대로 전달됩니다."""
        repo = SqlalchemyMembershipRepository(db_session)
        broken = new_membership(seed["project"], seed["member"])
        broken.role = None

        with pytest.raises(IntegrityError):
            repo.create(broken)

        # 검증: 롤백 후 세션은 계속 사용 가능
        repo.create(new_membership(seed["project"], seed["member"]))
        assert len(repo.list_by_project(seed["project"].id)) == 1

    def test_list_by_project_filters_status(self, db_session, seed):
        repo = SqlalchemyMembershipRepository(db_session)
        repo.create(new_membership(seed["project"], seed["member"]))
        suspended = new_membership(seed["project"], seed["outsider"])
        suspended.status = "SUSPENDED"
        repo.create(suspended)

        active = repo.list_by_project(seed["project"].id, status="ACTIVE")

        assert [m.user_id for m in active] == [seed["member"].id]

    def test_memberships_cascade_with_project(self, db_session, seed):
        repo = SqlalchemyMembershipRepository(db_session)
        repo.create(new_membership(seed["project"], seed["member"]))

        SqlalchemyProjectRepository(db_session).delete(seed["project"])

        assert db_session.query(models.ProjectMembership).count() == 0
