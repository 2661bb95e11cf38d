from __future__ import annotations

from typing import ClassVar

from .endpoint import Endpoint


class UserInfo(Endpoint):
    """Profile of the user the OAuth token belongs to."""

    PATH: ClassVar[str] = "v01/user/info"
    REQUIRES_OAUTH_TOKEN: ClassVar[bool] = True
