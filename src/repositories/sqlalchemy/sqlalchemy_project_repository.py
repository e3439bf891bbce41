from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from src.database import models
from src.repositories.interfaces import IProjectRepository

class SqlalchemyProjectRepository(IProjectRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, project_model: models.Project) -> models.Project:
        self.db.add(project_model)
        self.db.commit()
        self.db.refresh(project_model)
        return project_model

    def find_by_id(self, project_id: int) -> Optional[models.Project]:
        return self.db.query(models.Project).options(selectinload(models.Project.admins)).filter(models.Project.id == project_id).first()

    def find_by_name(self, name: str) -> Optional[models.Project]:
        return self.db.query(models.Project).filter(models.Project.name == name).first()

    def list_all(self) -> List[models.Project]:
        return self.db.query(models.Project).order_by(models.Project.name.asc()).all()

    def delete(self, project: models.Project) -> bool:
        if project:
            self.db.delete(project)
            self.db.commit()
            return True
        return False

    def add_admin(self, project: models.Project, user: models.User):
        if user not in project.admins:
            project.admins.append(user)
            self.db.commit()

    def remove_admin(self, project: models.Project, user: models.User):
        if user in project.admins:
            project.admins.remove(user)
            self.db.commit()
