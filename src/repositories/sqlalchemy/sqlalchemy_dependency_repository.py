from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IDependencyRepository
from src.repositories.sqlalchemy.integrity import is_unique_violation
from src.services.exceptions import DependencyAlreadyExistsError

class SqlalchemyDependencyRepository(IDependencyRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, dependency: models.TaskDependency) -> models.TaskDependency:
        self.db.add(dependency)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not is_unique_violation(
                e, "uq_dependency_pair", models.TaskDependency.__tablename__, ("dependent_ticket_id", "depends_on_ticket_id")
            ):
                raise
            raise DependencyAlreadyExistsError(
                f"Dependency already exists between tickets "
                f"'{dependency.dependent_ticket_id}' and '{dependency.depends_on_ticket_id}'."
            ) from e
        self.db.refresh(dependency)
        return dependency

    def find_by_id(self, dependency_id: int) -> Optional[models.TaskDependency]:
        return self.db.query(models.TaskDependency).filter(models.TaskDependency.id == dependency_id).first()

    def find_by_pair(self, dependent_ticket_id: int, depends_on_ticket_id: int) -> Optional[models.TaskDependency]:
        return self.db.query(models.TaskDependency).filter(
            models.TaskDependency.dependent_ticket_id == dependent_ticket_id,
            models.TaskDependency.depends_on_ticket_id == depends_on_ticket_id
        ).first()

    def list_by_dependent(self, ticket_id: int, active: bool = True) -> List[models.TaskDependency]:
        return self.db.query(models.TaskDependency).filter(
            models.TaskDependency.dependent_ticket_id == ticket_id,
            models.TaskDependency.active == active
        ).order_by(models.TaskDependency.id.asc()).all()

    def list_by_depends_on(self, ticket_id: int, active: bool = True) -> List[models.TaskDependency]:
        return self.db.query(models.TaskDependency).filter(
            models.TaskDependency.depends_on_ticket_id == ticket_id,
            models.TaskDependency.active == active
        ).order_by(models.TaskDependency.id.asc()).all()

    def list_by_project(self, project_id: int, active: bool = True) -> List[models.TaskDependency]:
        return self.db.query(models.TaskDependency).filter(
            models.TaskDependency.project_id == project_id,
            models.TaskDependency.active == active
        ).order_by(models.TaskDependency.id.asc()).all()

    def save(self, dependency: models.TaskDependency) -> models.TaskDependency:
        self.db.add(dependency)
        self.db.commit()
        self.db.refresh(dependency)
        return dependency

    def count_by_dependent(self, ticket_id: int) -> int:
        return self.db.query(models.TaskDependency).filter(
            models.TaskDependency.dependent_ticket_id == ticket_id,
            models.TaskDependency.active.is_(True)
        ).count()

    def count_by_depends_on(self, ticket_id: int) -> int:
        return self.db.query(models.TaskDependency).filter(
            models.TaskDependency.depends_on_ticket_id == ticket_id,
            models.TaskDependency.active.is_(True)
        ).count()
