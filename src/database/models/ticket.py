from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from ..database import Base
from .association import ticket_assignees

class Ticket(Base):
    """
    프로젝트에 속한 작업 항목(티켓)을 나타냅니다.
    티켓의 생성과 상태 변경은 외부 티켓 서비스의 책임이며,
    이 코어는 상태와 담당자 목록을 읽기만 합니다.
    """
    __tablename__ = "tickets"
    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    status = Column(String, nullable=False, default="TODO")
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    project = relationship("Project", back_populates="tickets")
    assignees = relationship("User", secondary=ticket_assignees)

    @property
    def assignee_ids(self):
        return [user.id for user in self.assignees]
