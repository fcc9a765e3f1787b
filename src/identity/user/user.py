"""User aggregate root with the Address value object."""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, ValueObject

from identity.domain import identity
from identity.shared.email import EmailAddress
from identity.shared.phone import PhoneNumber
from shared.security import hash_password, verify_password

MIN_PASSWORD_LENGTH = 6

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


@identity.value_object(part_of="User")
class Address:
    """A postal address kept on the user's profile."""

    street: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    zip_code: String(max_length=20)
    country: String(max_length=100)


def _check_password(password):
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})


@identity.aggregate
class User:
    """A registered shopper or administrator.

    Emails are stored lower-cased and are unique across users. The plain
    password never reaches the aggregate's state; only its hash does.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    role: String(choices=Role, default=Role.USER.value)
    address: ValueObject(Address)
    phone: String(max_length=20)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Name is required"]})

    @classmethod
    def register(cls, name, email, password, role=Role.USER.value, phone=None, address=None):
        from identity.user.events import UserRegistered

        _check_password(password)
        normalized_email = EmailAddress.normalize(email)
        if phone:
            PhoneNumber(number=phone)

        now = datetime.now()
        user = cls(
            name=name.strip() if name else name,
            email=normalized_email,
            password_hash=hash_password(password),
            role=role,
            phone=phone,
            address=address,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=user.name,
                email=normalized_email,
                role=role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self):
        return self.role == Role.ADMIN.value

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    def update_profile(self, name=_UNSET, email=_UNSET, password=_UNSET, phone=_UNSET, address=_UNSET):
        """Change any subset of the profile. Passing nothing raises no event."""
        from identity.user.events import ProfileUpdated

        changed = []

        if name is not _UNSET and name is not None:
            self.name = name.strip()
            changed.append("name")

        if email is not _UNSET and email is not None:
            normalized_email = EmailAddress.normalize(email)
            if normalized_email != self.email:
                self.email = normalized_email
                changed.append("email")

        if password is not _UNSET and password:
            _check_password(password)
            self.password_hash = hash_password(password)
            changed.append("password")

        if phone is not _UNSET:
            if phone:
                PhoneNumber(number=phone)
            self.phone = phone or None
            changed.append("phone")

        if address is not _UNSET:
            self.address = address
            changed.append("address")

        if not changed:
            return

        self.updated_at = datetime.now()
        self.raise_(
            ProfileUpdated(
                user_id=self.id,
                changed_fields=",".join(changed),
                updated_at=self.updated_at,
            )
        )
