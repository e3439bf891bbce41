from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from ..database import Base

class TaskDependency(Base):
    """
    "dependent 티켓은 depends_on 티켓이 열려 있는 동안 완료될 수 없다"는 방향성 관계를 나타냅니다.

    삭제는 active=False로 표시하는 소프트 삭제만 허용되며, 이력 보존을 위해 물리적으로 지우지 않습니다.
    (dependent_ticket_id, depends_on_ticket_id) 순서쌍마다 하나의 간선만 존재할 수 있습니다.
    """
    __tablename__ = "task_dependencies"
    __table_args__ = (
        UniqueConstraint("dependent_ticket_id", "depends_on_ticket_id", name="uq_dependency_pair"),
    )

    id = Column(Integer, primary_key=True, index=True)
    dependent_ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    depends_on_ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    relationship_type = Column(String, nullable=False, default="BLOCKING")
    description = Column(String, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    active = Column(Boolean, nullable=False, default=True)

    project = relationship("Project", back_populates="dependencies")
