from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    server_endpoint: str = "www.123456.com"
    server_endpoint_ssl: bool = False
    login_path: str = "/login"

    # None keeps httpx from applying its own default timeout
    request_timeout: float | None = None
    network_error_message: str = "Network connection failed, please check and try again."
    user_agent: str = "basemvi client"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def base_url(self) -> str:
        protocol = "https" if self.server_endpoint_ssl else "http"
        return f"{protocol}://{self.server_endpoint}"


settings = Settings()


def get_settings() -> Settings:
    return settings
