"""Profile management: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import _UNSET, Address, User


@identity.command(part_of="User")
class UpdateProfile:
    user_id: Identifier(required=True)
    name: String(max_length=100)
    email: String(max_length=254)
    password: String(max_length=128)
    phone: String(max_length=20)
    address: Text()  # JSON object with street/city/state/zip_code/country


@identity.command_handler(part_of=User)
class ManageProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        if command.email:
            existing = repo.find_by_email(command.email)
            if existing is not None and existing.id != user.id:
                raise ValidationError({"email": ["Email is already in use"]})

        address = _UNSET
        if command.address:
            address = Address(**json.loads(command.address))

        user.update_profile(
            name=command.name if command.name is not None else _UNSET,
            email=command.email if command.email is not None else _UNSET,
            password=command.password if command.password else _UNSET,
            phone=command.phone if command.phone is not None else _UNSET,
            address=address,
        )
        repo.add(user)
