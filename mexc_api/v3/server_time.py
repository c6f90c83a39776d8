"""Server time: ``GET /api/v3/time``."""

from dataclasses import dataclass
from datetime import datetime

from mexc_api.endpoint import PublicEndpoint, checked_parser, expect_object
from mexc_api.types import Json, datetime_from_ms

TIME_PATH = "/api/v3/time"


@dataclass
class ServerTimeOutput:
    server_time: datetime

    @classmethod
    def from_json(cls, data: Json) -> "ServerTimeOutput":
        return cls(server_time=datetime_from_ms(expect_object(data)["serverTime"]))


class TimeEndpoint(PublicEndpoint):
    async def time(self) -> ServerTimeOutput:
        """Get the exchange's current time.

        Useful to measure the clock skew that the receive window must absorb.

        Returns:
            ServerTimeOutput: The server time as a UTC datetime

        Endpoint:
            GET /api/v3/time

        """
        return await self._send_public_request(
            TIME_PATH, None, checked_parser(ServerTimeOutput.from_json)
        )
