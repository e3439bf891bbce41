from sqlalchemy import Table, Column, Integer, ForeignKey
from ..database import Base

# 프로젝트 관리자 목록. 멤버십(ProjectMembership)과 독립적으로 관리되며,
# 여기에 등록된 사용자는 프로젝트 내의 모든 권한을 암묵적으로 가집니다.
project_admins = Table(
    "project_admins",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)

# 티켓 담당자(assignee) 목록
ticket_assignees = Table(
    "ticket_assignees",
    Base.metadata,
    Column("ticket_id", Integer, ForeignKey("tickets.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)
