"""Acting identity."""

from polly.domain.model.common import DomainModel
from polly.domain.value import Role, UserId


class Identity(DomainModel):
    """Authenticated caller, built from a verified platform access token.

    An unauthenticated caller is represented by ``None`` rather than an
    Identity instance.
    """

    user_id: UserId
    email: str | None = None
    name: str | None = None
    role: Role = Role.REGULAR

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
