from .association import project_admins, ticket_assignees
from .user import User
from .project import Project
from .membership import ProjectMembership
from .ticket import Ticket
from .dependency import TaskDependency
