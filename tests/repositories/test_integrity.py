# tests/repositories/test_integrity.py
from types import SimpleNamespace

from sqlalchemy.exc import IntegrityError

from src.repositories.sqlalchemy.integrity import is_unique_violation

PAIR = ("dependent_ticket_id", "depends_on_ticket_id")


class DriverError(Exception):
    """diag 속성을 가진 PostgreSQL 드라이버 예외를 흉내 냅니다."""
    def __init__(self, message, constraint_name=None):
        super().__init__(message)
        if constraint_name is not None:
            self.diag = SimpleNamespace(constraint_name=constraint_name)


def integrity_error(orig):
    return IntegrityError("INSERT INTO task_dependencies ...", {}, orig)


class TestIsUniqueViolation:
    def test_sqlite_unique_message_matches_columns(self):
        error = integrity_error(DriverError(
            "UNIQUE constraint failed: task_dependencies.dependent_ticket_id, task_dependencies.depends_on_ticket_id"
        ))
        assert is_unique_violation(error, "uq_dependency_pair", "task_dependencies", PAIR) is True

    def test_sqlite_not_null_message_is_not_unique(self):
        error = integrity_error(DriverError("NOT NULL constraint failed: task_dependencies.project_id"))
        assert is_unique_violation(error, "uq_dependency_pair", "task_dependencies", PAIR) is False

    def test_sqlite_unique_on_other_columns_is_not_matched(self):
        error = integrity_error(DriverError("UNIQUE constraint failed: projects.name"))
        assert is_unique_violation(error, "uq_dependency_pair", "task_dependencies", PAIR) is False

    def test_driver_constraint_name_is_authoritative(self):
        matched = integrity_error(DriverError("duplicate key value", constraint_name="uq_dependency_pair"))
        other = integrity_error(DriverError("violates foreign key", constraint_name="task_dependencies_project_id_fkey"))

        assert is_unique_violation(matched, "uq_dependency_pair", "task_dependencies", PAIR) is True
        assert is_unique_violation(other, "uq_dependency_pair", "task_dependencies", PAIR) is False

    def test_constraint_name_in_message(self):
        error = integrity_error(DriverError("Duplicate entry '1-2' for key 'uq_dependency_pair'"))
        assert is_unique_violation(error, "uq_dependency_pair", "task_dependencies", PAIR) is True
