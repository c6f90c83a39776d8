"""Connectivity check: ``GET /api/v3/ping``."""

from mexc_api.endpoint import PublicEndpoint, checked_parser, parse_empty

PING_PATH = "/api/v3/ping"


class PingEndpoint(PublicEndpoint):
    async def ping(self) -> None:
        """Test connectivity to the REST API.

        Raises:
            ApiError: If the exchange answers with an error
            TransportError: If the exchange cannot be reached

        Endpoint:
            GET /api/v3/ping

        """
        await self._send_public_request(PING_PATH, None, checked_parser(parse_empty))
