from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.models.envelope import Envelope

TRANSPORT_ERROR_CODE = -1


class RequestType(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestError:
    code: int  # Envelope code, or TRANSPORT_ERROR_CODE when the producer raised
    message: str

    @classmethod
    def from_envelope(cls, envelope: "Envelope") -> "RequestError":
        return cls(code=envelope.code, message=envelope.message or "")

    @classmethod
    def from_exception(cls, exc: BaseException, fallback: str) -> "RequestError":
        return cls(code=TRANSPORT_ERROR_CODE, message=str(exc) or fallback)

    @property
    def is_transport_error(self) -> bool:
        return self.code == TRANSPORT_ERROR_CODE
