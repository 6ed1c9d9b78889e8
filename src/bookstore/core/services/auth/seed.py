"""Initial roles and administrator account for the identity store."""

from loguru import logger
from sqlmodel import Session

from src.bookstore.core.security import hash_password
from src.bookstore.entities.core.identity import IdentityRepository, IdentityUser
from src.bookstore.runtime.config.config_data import SeedConfig


def create_identity(
    session: Session,
    username: str,
    email: str,
    password: str,
    roles: list[str],
    bcrypt_rounds: int = 12,
) -> IdentityUser:
    """Stage a new account with a hashed password and its roles."""
    repo = IdentityRepository(session)
    user = IdentityUser(
        username=username,
        email=email,
        password_hash=hash_password(password, rounds=bcrypt_rounds),
        roles=roles,
    )
    return repo.create_user(user)


def seed_identities(session: Session, seed_config: SeedConfig, bcrypt_rounds: int = 12) -> bool:
    """Ensure the configured roles and admin account exist, then commit.

    Returns:
        True if the admin account was created by this call
    """
    repo = IdentityRepository(session)
    for role in seed_config.roles:
        repo.ensure_role(role)

    created = False
    if not seed_config.admin_password:
        logger.warning("Seed admin password not configured; skipping admin account")
    elif repo.find_by_username(seed_config.admin_username) is None:
        create_identity(
            session,
            username=seed_config.admin_username,
            email=seed_config.admin_email,
            password=seed_config.admin_password,
            roles=seed_config.admin_roles,
            bcrypt_rounds=bcrypt_rounds,
        )
        created = True
        logger.info("Seeded admin account {}", seed_config.admin_username)

    session.commit()
    return created
