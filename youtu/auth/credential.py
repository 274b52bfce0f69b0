"""Application credential used to sign every request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from youtu.errors import ValidationError

if TYPE_CHECKING:
    from youtu.config.settings import Settings


USER_ID_MAX_LEN = 110
_UINT32_MAX = 2**32 - 1


@dataclass(frozen=True, slots=True)
class Credential:
    """
    Identity of the calling application.

    ``expired`` is a unix timestamp after which signatures stop being valid;
    ``0`` makes a signature valid only at the instant it was issued.
    ``user_id`` is the caller-defined user the requests are made for.
    """

    app_id: int
    secret_id: str
    secret_key: str = field(repr=False)
    expired: int = 0
    user_id: str = ""

    def __post_init__(self) -> None:
        if len(self.user_id) > USER_ID_MAX_LEN:
            raise ValidationError(
                "user id too long",
                details=f"{len(self.user_id)} characters > {USER_ID_MAX_LEN}",
            )
        for name in ("app_id", "expired"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _UINT32_MAX:
                raise ValidationError(f"{name} must be an unsigned 32-bit integer", details=repr(value))

    @classmethod
    def from_settings(cls, settings: Settings) -> Credential:
        return cls(
            app_id=settings.app_id,
            secret_id=settings.secret_id,
            secret_key=settings.secret_key,
            expired=settings.expired,
            user_id=settings.user_id,
        )
