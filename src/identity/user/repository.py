"""Repository for the User aggregate."""

from identity.domain import identity
from identity.user.user import User


@identity.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Find a user by email, case-insensitively."""
        if not email:
            return None
        return self._dao.query.filter(email=email.strip().lower()).all().first
