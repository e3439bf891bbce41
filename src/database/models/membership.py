from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, UniqueConstraint, func
from sqlalchemy.orm import relationship
from ..database import Base

class ProjectMembership(Base):
    """
    한 사용자가 한 프로젝트에서 가지는 역할과 권한을 나타냅니다.

    permissions는 역할 부여 시점에 역할 카탈로그에서 복사된 스냅샷(materialized set)이며,
    이후 카탈로그가 바뀌어도 update_role이 다시 호출되기 전까지는 변하지 않습니다.
    (project_id, user_id) 쌍마다 하나의 멤버십만 존재할 수 있습니다.
    """
    __tablename__ = "project_memberships"
    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_membership_project_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(String, nullable=False)
    permissions = Column(JSON, nullable=False, default=list)
    status = Column(String, nullable=False, default="ACTIVE")
    joined_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    invited_by = Column(Integer, ForeignKey("users.id"), nullable=True)

    project = relationship("Project", back_populates="memberships")
    user = relationship("User", back_populates="memberships", foreign_keys=[user_id])

    def has_permission(self, permission: str) -> bool:
        return self.permissions is not None and permission in self.permissions
