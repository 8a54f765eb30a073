"""Server info: /admin/serverinfo"""

from ..constants import SERVER_INFO_PATH
from ..models.connection import RequestConfig
from ..models.representations import ServerInfoRepresentation
from .base import Resource


class ServerInfo(Resource):
    base_path = SERVER_INFO_PATH

    async def find(
        self, *, request_config: RequestConfig | None = None
    ) -> ServerInfoRepresentation:
        """Server version, providers, themes and memory/system info."""
        return await self._request(
            "GET",
            response_model=ServerInfoRepresentation,
            request_config=request_config,
        )
