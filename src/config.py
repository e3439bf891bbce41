# src/config.py
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class CycleDetection(str, Enum):
    """의존성 순환 검사 정책."""
    TRANSITIVE = "transitive"  # 전체 그래프 도달 가능성 검사 (기본값)
    DIRECT = "direct"          # 역방향 간선 하나만 검사 (레거시 호환 모드)


class BlockingPolicy(str, Enum):
    """티켓 차단 여부 판정 정책."""
    OPEN_DEPENDENCIES = "open_dependencies"  # 선행 티켓이 DONE이 아닐 때만 차단 (기본값)
    ANY_ACTIVE_EDGE = "any_active_edge"      # 활성 간선이 하나라도 있으면 차단 (레거시 호환 모드)


class Settings(BaseSettings):
    """
    애플리케이션 설정. 환경 변수(TRACKER_ 접두사) 또는 .env 파일로 덮어쓸 수 있습니다.
    (예: TRACKER_DATABASE_URL=sqlite:///:memory:)
    """
    model_config = SettingsConfigDict(env_prefix="TRACKER_", env_file=".env", extra="ignore")

    database_url: str = "sqlite:///ticket_tracker.db"
    cycle_detection: CycleDetection = CycleDetection.TRANSITIVE
    blocking_policy: BlockingPolicy = BlockingPolicy.OPEN_DEPENDENCIES

    log_level: str = "INFO"
    log_format: str = "readable"  # readable | json


settings = Settings()
