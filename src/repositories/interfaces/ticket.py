from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from src.database import models

class ITicketRepository(ABC):
    """
    외부 티켓 서비스가 소유한 티켓에 대한 읽기 전용 접근.
    의존성 엔진과 완료 게이트는 티켓의 상태와 담당자만 필요로 합니다.
    """

    @abstractmethod
    def find_by_id(self, ticket_id: int) -> Optional[models.Ticket]:
        """고유 ID로 특정 티켓을 조회합니다."""
        pass

    @abstractmethod
    def get_statuses(self, ticket_ids: Iterable[int]) -> Dict[int, str]:
        """
        여러 티켓의 상태를 한 번에 조회합니다.

        Returns:
            {ticket_id: status} 딕셔너리. 존재하지 않는 티켓은 포함되지 않습니다.
        """
        pass
