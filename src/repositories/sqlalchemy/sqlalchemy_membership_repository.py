from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IMembershipRepository
from src.repositories.sqlalchemy.integrity import is_unique_violation
from src.services.exceptions import MembershipConflictError

class SqlalchemyMembershipRepository(IMembershipRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, membership: models.ProjectMembership) -> models.ProjectMembership:
        self.db.add(membership)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # (project_id, user_id) 유일성 제약 위반만 Conflict로 바꿉니다. 동시 요청 중 늦게 도착한 쪽입니다.
            if not is_unique_violation(e, "uq_membership_project_user", models.ProjectMembership.__tablename__, ("project_id", "user_id")):
                raise
            raise MembershipConflictError(
                f"User '{membership.user_id}' is already a member of project '{membership.project_id}'."
            ) from e
        self.db.refresh(membership)
        return membership

    def find_by_project_and_user(self, project_id: int, user_id: int) -> Optional[models.ProjectMembership]:
        return self.db.query(models.ProjectMembership).filter(
            models.ProjectMembership.project_id == project_id,
            models.ProjectMembership.user_id == user_id
        ).first()

    def list_by_project(self, project_id: int, status: Optional[str] = None) -> List[models.ProjectMembership]:
        query = self.db.query(models.ProjectMembership).filter(models.ProjectMembership.project_id == project_id)
        if status is not None:
            query = query.filter(models.ProjectMembership.status == status)
        return query.order_by(models.ProjectMembership.joined_at.asc(), models.ProjectMembership.id.asc()).all()

    def save(self, membership: models.ProjectMembership) -> models.ProjectMembership:
        self.db.add(membership)
        self.db.commit()
        self.db.refresh(membership)
        return membership

    def delete(self, membership: models.ProjectMembership) -> bool:
        if membership:
            self.db.delete(membership)
            self.db.commit()
            return True
        return False
