"""Data-access layer for the identity store."""

from sqlmodel import Session, select

from src.bookstore.entities.core.identity.entity import IdentityUser
from src.bookstore.entities.core.identity.table import (
    IdentityUserTable,
    RoleTable,
    UserRoleTable,
)


class IdentityRepository:
    """Data-access layer for accounts and their roles.

    Writes are staged on the session; the caller decides when to commit.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_username(self, username: str) -> IdentityUser | None:
        statement = select(IdentityUserTable).where(IdentityUserTable.username == username)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def get(self, user_id: str) -> IdentityUser | None:
        row = self._session.get(IdentityUserTable, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_roles(self, user_id: str) -> list[str]:
        statement = (
            select(RoleTable.name)
            .join(UserRoleTable, UserRoleTable.role_id == RoleTable.id)
            .where(UserRoleTable.user_id == user_id)
            .order_by(RoleTable.name)
        )
        return list(self._session.exec(statement).all())

    def create_user(self, user: IdentityUser) -> IdentityUser:
        row = IdentityUserTable.model_validate(user.model_dump(exclude={"roles"}))
        self._session.add(row)
        self._session.flush()
        for role in user.roles:
            self.add_to_role(user.id, role)
        return user

    def ensure_role(self, name: str) -> RoleTable:
        role = self._session.exec(select(RoleTable).where(RoleTable.name == name)).first()
        if role is None:
            role = RoleTable(name=name)
            self._session.add(role)
            self._session.flush()
        return role

    def add_to_role(self, user_id: str, role_name: str) -> None:
        role = self.ensure_role(role_name)
        link = self._session.get(UserRoleTable, (user_id, role.id))
        if link is None:
            self._session.add(UserRoleTable(user_id=user_id, role_id=role.id))
            self._session.flush()

    def _to_entity(self, row: IdentityUserTable) -> IdentityUser:
        user = IdentityUser.model_validate(row, from_attributes=True)
        user.roles = self.get_roles(row.id)
        return user
