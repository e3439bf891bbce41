from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from ..database import Base
from .association import project_admins

class Project(Base):
    """
    티켓과 멤버십이 소속되는 하나의 작업 공간을 나타냅니다.
    소유자(owner)와 관리자(admins)는 멤버십 상태와 무관하게 모든 권한을 가집니다.
    """
    __tablename__ = "projects"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    description = Column(String, nullable=True)
    status = Column(String, nullable=False, default="ACTIVE")
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", foreign_keys=[owner_id])
    admins = relationship("User", secondary=project_admins)
    memberships = relationship("ProjectMembership", back_populates="project", cascade="all, delete-orphan")
    tickets = relationship("Ticket", back_populates="project", cascade="all, delete-orphan")
    dependencies = relationship("TaskDependency", back_populates="project", cascade="all, delete-orphan")

    @property
    def admin_ids(self):
        return [admin.id for admin in self.admins]
