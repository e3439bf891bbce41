import logging

from .database import engine, SessionLocal, Base
from .models import *
from src.logging_config import configure_logging
from src.services.role_catalog import Role, permissions_for_role

logger = logging.getLogger(__name__)

def initialize_db():
    """
    DB와 테이블을 생성하고, 기본 데이터(관리자 사용자와 기본 프로젝트)를 삽입합니다.
    SQLAlchemy 모델을 사용하여 모든 작업을 수행합니다.
    """
    logger.info("Initializing database...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created.")

    db = SessionLocal()
    try:
        if db.query(User).first():
            logger.info("Seed data already present, skipping.")
            return

        admin_user = User(username='admin', email='admin@localhost')
        db.add(admin_user)
        db.commit()

        default_project = Project(name='default', description='Default project', owner_id=admin_user.id)
        db.add(default_project)
        db.commit()

        # 소유자도 멤버 목록에 보이도록 ADMIN 멤버십을 함께 생성
        db.add(ProjectMembership(
            project_id=default_project.id,
            user_id=admin_user.id,
            role=Role.ADMIN.value,
            permissions=list(permissions_for_role(Role.ADMIN.value)),
            status='ACTIVE',
        ))
        db.commit()
        logger.info("Seeded admin user %s and project %s", admin_user.id, default_project.id)

    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    configure_logging()
    initialize_db()
