from .sqlalchemy_project_repository import SqlalchemyProjectRepository
from .sqlalchemy_user_repository import SqlalchemyUserRepository
from .sqlalchemy_ticket_repository import SqlalchemyTicketRepository
from .sqlalchemy_membership_repository import SqlalchemyMembershipRepository
from .sqlalchemy_dependency_repository import SqlalchemyDependencyRepository
