from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """
    Basic response structure returned by the backend.

    ``code == 0`` means ``payload`` is the authoritative result; any other code
    means ``message`` describes the failure.
    """

    model_config = ConfigDict(populate_by_name=True)

    code: int = -1
    message: str | None = Field(default=None, alias="msg")
    payload: T | None = Field(default=None, alias="data")

    @property
    def is_success(self) -> bool:
        return self.code == 0
