# src/services/exceptions.py

# --- Error kinds ---
class NotFoundError(Exception):
    """참조한 프로젝트/사용자/티켓/멤버십/의존성이 존재하지 않을 때"""
    pass

class ConflictError(Exception):
    """유일성 제약(멤버십, 의존성 간선 등)을 위반할 때"""
    pass

class CircularDependencyError(Exception):
    """새 의존성 간선이 순환을 만들 때"""
    pass

class InvalidArgumentError(ValueError):
    """알 수 없는 역할, 자기 참조 간선 등 잘못된 인자가 전달될 때"""
    pass

# --- Not Found ---
class ProjectNotFoundError(NotFoundError):
    """프로젝트를 찾을 수 없을 때"""
    pass

class UserNotFoundError(NotFoundError):
    """사용자를 찾을 수 없을 때"""
    pass

class TicketNotFoundError(NotFoundError):
    """티켓을 찾을 수 없을 때"""
    pass

class MembershipNotFoundError(NotFoundError):
    """프로젝트 내 사용자 멤버십을 찾을 수 없을 때"""
    pass

class DependencyNotFoundError(NotFoundError):
    """의존성 간선을 찾을 수 없을 때"""
    pass

# --- Conflict ---
class MembershipConflictError(ConflictError):
    """동일한 (프로젝트, 사용자) 멤버십이 이미 존재할 때"""
    pass

class DependencyAlreadyExistsError(ConflictError):
    """동일한 (dependent, depends_on) 간선이 이미 존재할 때 (비활성 간선 포함)"""
    pass

class ProjectCreationError(ConflictError):
    """프로젝트 생성 실패 시 (이름 중복)"""
    pass

class UserCreationError(ConflictError):
    """사용자 생성 실패 시 (이름 중복)"""
    pass

# --- Invalid Argument ---
class UnknownRoleError(InvalidArgumentError):
    """역할 카탈로그에 없는 역할 이름일 때"""
    pass

class SelfDependencyError(InvalidArgumentError):
    """티켓이 자기 자신에 의존하도록 요청될 때"""
    pass

class CrossProjectDependencyError(InvalidArgumentError):
    """간선의 티켓이 요청한 프로젝트에 속하지 않을 때"""
    pass

class InvalidRelationshipTypeError(InvalidArgumentError):
    """지원하지 않는 의존성 관계 종류일 때"""
    pass

class InvalidStatusError(InvalidArgumentError):
    """지원하지 않는 멤버십 상태일 때"""
    pass
