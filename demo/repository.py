from pydantic import BaseModel, ConfigDict, Field

from client.repositories import BaseRepository
from core.models.envelope import Envelope
from core.models.network import RequestType


class UserInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(default="", alias="userId")
    user_name: str = Field(default="", alias="userName")
    avatar: str = ""
    token: str = ""


class UserRepository(BaseRepository):
    def __init__(self, api_client, login_path: str = "/login") -> None:
        super().__init__(api_client)
        self.login_path = login_path

    async def login(self, user_name: str, password: str) -> Envelope[UserInfo]:
        return await self.execute_request(
            UserInfo,
            lambda: self.api_client.perform_request(
                self.login_path,
                RequestType.PUT,
                body={"userName": user_name, "password": password},
            ),
        )
