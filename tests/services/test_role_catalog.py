# tests/services/test_role_catalog.py
import pytest

from src.services.role_catalog import (
    Role, ROLE_PERMISSIONS, ADMIN_PERMISSIONS, MANAGER_PERMISSIONS,
    MEMBER_PERMISSIONS, OBSERVER_PERMISSIONS, permissions_for_role, is_known_role
)

# ===================================================================
#  역할 간 포함 관계 테스트
#  권한 목록은 열거로 정의되므로 카탈로그를 수정할 때마다 이 관계가 깨지지 않았는지 확인합니다.
# ===================================================================
class TestRoleContainment:
    @pytest.mark.parametrize("wider, narrower", [
        (ADMIN_PERMISSIONS, MANAGER_PERMISSIONS),
        (MANAGER_PERMISSIONS, MEMBER_PERMISSIONS),
        (MEMBER_PERMISSIONS, OBSERVER_PERMISSIONS),
    ])
    def test_roles_are_nested(self, wider, narrower):
        """상위 역할은 하위 역할의 모든 권한을 포함해야 합니다."""
        missing = set(narrower) - set(wider)
        assert not missing, f"missing from wider role: {sorted(missing)}"

    def test_tables_have_no_duplicate_tokens(self):
        """각 역할의 권한 목록에 중복 토큰이 없어야 합니다."""
        for role, permissions in ROLE_PERMISSIONS.items():
            assert len(permissions) == len(set(permissions)), role

    def test_member_has_only_scoped_variants(self):
        """MEMBER는 담당/본인 한정 권한만 가지고 전체 권한은 가지지 않습니다."""
        assert "ticket.edit_assigned" in MEMBER_PERMISSIONS
        assert "ticket.change_status_assigned" in MEMBER_PERMISSIONS
        assert "comment.edit_own" in MEMBER_PERMISSIONS
        assert "ticket.edit" not in MEMBER_PERMISSIONS
        assert "ticket.change_status" not in MEMBER_PERMISSIONS
        assert "comment.edit" not in MEMBER_PERMISSIONS

    @pytest.mark.parametrize("role", [Role.MANAGER, Role.ADMIN])
    def test_manager_and_admin_have_blanket_variants(self, role):
        permissions = permissions_for_role(role.value)
        for token in ("ticket.edit", "ticket.change_status", "comment.edit", "comment.delete"):
            assert token in permissions

    def test_admin_only_permissions(self):
        """프로젝트 삭제, 멤버 관리, 감사 로그 삭제는 ADMIN에게만 있습니다."""
        for token in ("project.delete", "project.manage_members", "project.manage_roles", "audit.delete"):
            assert token in ADMIN_PERMISSIONS
            assert token not in MANAGER_PERMISSIONS

# ===================================================================
#  카탈로그 조회 테스트
# ===================================================================
class TestPermissionsForRole:
    def test_known_roles(self):
        assert permissions_for_role("MEMBER") == MEMBER_PERMISSIONS
        assert permissions_for_role(Role.OBSERVER) == OBSERVER_PERMISSIONS

    def test_unknown_role_returns_empty(self):
        """알 수 없는 역할은 빈 권한 목록으로 처리됩니다 (fail-closed)."""
        assert permissions_for_role("SUPERUSER") == ()
        assert not is_known_role("SUPERUSER")

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS["MEMBER"] = ("everything",)
