"""User registration — command, handler and entry point.

Passwords are hashed before the command is built so that no plain-text
password is ever carried by a command.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.account.email import EmailAddress
from storefront.account.user import User
from storefront.auth.passwords import check_password_policy, hash_password
from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.errors import InvalidInput

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise InvalidInput({"email": ["User with this email exists already, please log in"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
        )
        repo.add(user)
        current_domain.repository_for(Cart).add(Cart.create(user_id=str(user.id)))

        logger.info("User registered", user_id=str(user.id))
        return str(user.id)


def register_user(name: str, email: str, password: str) -> str:
    errors = {}
    if not name or not name.strip():
        errors["name"] = ["Name is required"]
    try:
        email = EmailAddress(address=(email or "").lower()).address
    except ValidationError:
        errors["email"] = ["Email address is invalid"]
    try:
        check_password_policy(password)
    except InvalidInput as exc:
        errors.update(exc.messages)
    if errors:
        raise InvalidInput(errors)

    command = RegisterUser(
        name=name.strip(),
        email=email,
        password_hash=hash_password(password),
    )
    return current_domain.process(command, asynchronous=False)
