from .project import IProjectRepository
from .user import IUserRepository
from .ticket import ITicketRepository
from .membership import IMembershipRepository
from .dependency import IDependencyRepository
