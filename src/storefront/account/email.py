"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _invalid(address):
    return ValidationError({"address": [f"Invalid email address: {address!r}"]})


@storefront.value_object
class EmailAddress:
    """An address with a plausible local@domain.tld structure.

    No whitespace, exactly one @, no leading, trailing or doubled dots, no
    hyphen at either end of a domain label, and none of the characters
    reserved for quoted or bracketed forms.
    """

    address = String(required=True, max_length=254)

    @invariant.post
    def address_is_well_formed(self):
        address = self.address

        if any(ch.isspace() for ch in address) or address.count("@") != 1:
            raise _invalid(address)

        local_part, domain_part = address.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise _invalid(address)

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise _invalid(address)

        if "." not in domain_part or ".." in local_part or ".." in domain_part:
            raise _invalid(address)

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                raise _invalid(address)

        if any(ch in address for ch in _FORBIDDEN):
            raise _invalid(address)
