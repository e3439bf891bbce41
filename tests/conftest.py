# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.database.database import Base
from src.database import models


@pytest.fixture
def db_session():
    """테이블이 생성된 SQLite 인메모리 DB 세션. 테스트마다 새로 만들어집니다."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def seed(db_session):
    """소유자/멤버/외부인 사용자와 프로젝트 하나, 티켓 세 개를 미리 만들어 둡니다."""
    owner = models.User(username="owner")
    member = models.User(username="member")
    outsider = models.User(username="outsider")
    db_session.add_all([owner, member, outsider])
    db_session.commit()

    project = models.Project(name="tracker", owner_id=owner.id)
    db_session.add(project)
    db_session.commit()

    tickets = [
        models.Ticket(project_id=project.id, title=title, status="TODO", creator_id=owner.id)
        for title in ("T", "S", "R")
    ]
    tickets[0].assignees.append(member)
    db_session.add_all(tickets)
    db_session.commit()

    return {
        "owner": owner, "member": member, "outsider": outsider,
        "project": project, "tickets": tickets,
    }
