from typing import Dict, Iterable, Optional
from sqlalchemy.orm import Session, selectinload
from src.database import models
from src.repositories.interfaces import ITicketRepository

class SqlalchemyTicketRepository(ITicketRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_id(self, ticket_id: int) -> Optional[models.Ticket]:
        return self.db.query(models.Ticket).options(selectinload(models.Ticket.assignees)).filter(models.Ticket.id == ticket_id).first()

    def get_statuses(self, ticket_ids: Iterable[int]) -> Dict[int, str]:
        ids = list(ticket_ids)
        if not ids:
            return {}
        rows = self.db.query(models.Ticket.id, models.Ticket.status).filter(models.Ticket.id.in_(ids)).all()
        return {ticket_id: status for ticket_id, status in rows}
