"""
Demo app: log in once through the request scaffold and report the outcome.
"""

import logging

from client.api import APIClient
from core.abstract import App
from core.config import Settings
from demo.repository import UserRepository
from demo.view import LoginView
from demo.viewmodel import LoginUIState, LoginViewModel

logger = logging.getLogger(__name__)


class DemoApp(App):
    """Login demo client"""

    def __init__(
        self,
        settings: Settings,
        user_name: str,
        password: str,
        api_client: APIClient | None = None,
    ) -> None:
        super().__init__(settings)
        self.user_name = user_name
        self.password = password
        self.api_client = api_client or APIClient(
            self.settings.base_url,
            user_agent=self.settings.user_agent,
            timeout=self.settings.request_timeout,
        )
        self.repository = UserRepository(self.api_client, self.settings.login_path)
        self.view = LoginView(lambda: LoginViewModel(self.repository, settings=self.settings))

    @property
    def ui_state(self) -> LoginUIState | None:
        return self.view.states[-1] if self.view.states else None

    def run(self) -> int:
        self.view.start()
        try:
            self.view.set_user_name(self.user_name)
            self.view.set_password(self.password)
            if not self.view.submit():
                return 2

            self.view.vm.wait_idle()
        finally:
            try:
                # o cliente httpx pertence ao loop do worker
                self.view.vm.scope.launch(self.api_client.aclose()).result()
            finally:
                self.view.stop()

        state = self.ui_state
        if state is not None and state.is_login_success:
            return 0
        logger.error(f"Login failed: {state.error_msg if state else 'no response'}")
        return 1
