# src/bootstrap.py
from typing import Dict, Optional

from sqlalchemy.orm import Session

from src.config import Settings, settings as default_settings
from src.repositories.sqlalchemy import (
    SqlalchemyProjectRepository, SqlalchemyUserRepository, SqlalchemyTicketRepository,
    SqlalchemyMembershipRepository, SqlalchemyDependencyRepository
)
from src.services.completion_gate import CompletionGate
from src.services.dependency_service import DependencyService
from src.services.permission_service import PermissionService
from src.services.project_service import ProjectService


def build_services(db_session: Session, config: Optional[Settings] = None) -> Dict[str, object]:
    """
    하나의 DB 세션을 공유하는 리포지토리와 서비스 객체들을 생성합니다.
    (Repositories -> Services -> CompletionGate 순서로 의존성을 주입)

    Args:
        db_session: 요청 단위로 생성된 SQLAlchemy 세션.
        config: 순환 검사/차단 정책을 담은 설정. 생략하면 전역 설정을 사용합니다.

    Returns:
        'project', 'permission', 'dependency', 'completion' 키로 서비스에 접근하는 딕셔너리.
    """
    config = config or default_settings

    project_repo = SqlalchemyProjectRepository(db_session)
    user_repo = SqlalchemyUserRepository(db_session)
    ticket_repo = SqlalchemyTicketRepository(db_session)
    membership_repo = SqlalchemyMembershipRepository(db_session)
    dependency_repo = SqlalchemyDependencyRepository(db_session)

    project_service = ProjectService(user_repo, project_repo)
    permission_service = PermissionService(project_repo, user_repo, membership_repo)
    dependency_service = DependencyService(
        dependency_repo, ticket_repo, user_repo, project_repo,
        cycle_detection=config.cycle_detection,
        blocking_policy=config.blocking_policy,
    )
    completion_gate = CompletionGate(permission_service, dependency_service, ticket_repo)

    return {
        'project': project_service,
        'permission': permission_service,
        'dependency': dependency_service,
        'completion': completion_gate,
    }
