"""Identity store entities.

- IdentityUser: Domain entity for an account that can sign in
- IdentityUserTable / RoleTable / UserRoleTable: Database persistence models
- IdentityRepository: Data access layer
"""

from .entity import IdentityUser
from .repository import IdentityRepository
from .table import IdentityUserTable, RoleTable, UserRoleTable

__all__ = [
    "IdentityUser",
    "IdentityRepository",
    "IdentityUserTable",
    "RoleTable",
    "UserRoleTable",
]
