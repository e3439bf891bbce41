from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base

class User(Base):
    """
    프로젝트에 참여하고 티켓을 담당할 수 있는 사용자를 나타냅니다.
    사용자는 여러 프로젝트에 각각 하나의 멤버십(역할)으로 소속될 수 있습니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, nullable=True)

    memberships = relationship("ProjectMembership", back_populates="user", cascade="all, delete-orphan",
                               foreign_keys="ProjectMembership.user_id")
