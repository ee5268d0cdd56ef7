from collections.abc import Awaitable, Callable

from client.api import APIClient
from core.models.envelope import Envelope
from core.serialization import decode_envelope


class BaseRepository:
    """Base class of every repository: turns raw response bodies into envelopes."""

    def __init__(self, api_client: APIClient) -> None:
        self.api_client = api_client

    async def execute_request[T](
        self, shape: type[T], block: Callable[[], Awaitable[str]]
    ) -> Envelope[T]:
        """
        Run a request and decode its body.

        Args:
            shape: Payload type of the expected envelope
            block: Coroutine function returning the response body

        Returns:
            Decoded envelope
        """
        json_string = await block()
        return decode_envelope(json_string, shape)
