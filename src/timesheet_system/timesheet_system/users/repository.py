from __future__ import annotations

from typing import Optional, Protocol

from .model import PayProfile


class UserRepository(Protocol):
    """Repository interface for user pay profiles.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_pay_profile(self, user_id: str) -> Optional[PayProfile]:
        raise NotImplementedError
