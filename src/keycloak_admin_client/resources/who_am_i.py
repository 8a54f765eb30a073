"""Who am I: /admin/{realm}/console/whoami"""

from ..constants import ADMIN_CONSOLE_PATH
from ..models.connection import RequestConfig
from ..models.representations import WhoAmIRepresentation
from .base import Resource


class WhoAmI(Resource):
    base_path = ADMIN_CONSOLE_PATH

    async def find(
        self,
        *,
        realm: str | None = None,
        request_config: RequestConfig | None = None,
    ) -> WhoAmIRepresentation:
        """Identity and effective realm access of the token's subject."""
        return await self._request(
            "GET",
            "/whoami",
            realm=realm,
            response_model=WhoAmIRepresentation,
            request_config=request_config,
        )
