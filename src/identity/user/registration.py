"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import Role, User


@identity.command(part_of="User")
class RegisterUser:
    """Create a new account. The password arrives in plain text and is hashed by the aggregate."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    role: String(max_length=20, default=Role.USER.value)
    phone: String(max_length=20)


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User already exists"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            role=command.role or Role.USER.value,
            phone=command.phone,
        )
        repo.add(user)
        return str(user.id)
