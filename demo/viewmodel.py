from dataclasses import dataclass, field, replace

from client.viewmodels import BaseViewModel
from core.models.network import RequestError
from core.observable import Observable
from demo.repository import UserInfo, UserRepository


@dataclass(frozen=True)
class LoginUIState:
    is_login_success: bool = False
    user_info: UserInfo = field(default_factory=UserInfo)
    error_msg: str = ""


class LoginViewModel(BaseViewModel):
    def __init__(self, repository: UserRepository, **kwargs) -> None:
        super().__init__(**kwargs)
        self.repository = repository
        self.ui_state: Observable[LoginUIState] = Observable(LoginUIState())

    def login(self, user_name: str, password: str) -> None:
        self.run(
            lambda: self.repository.login(user_name, password),
            requires_login=False,
            show_loading=True,
            on_error=self._on_login_error,
            on_success=self._on_login_success,
        )

    def _on_login_error(self, error: RequestError) -> None:
        self.log_error(f"Login failed ({error.code}): {error.message}")
        self.ui_state.set(replace(self.ui_state.value, is_login_success=False, error_msg=error.message))

    def _on_login_success(self, user_info: UserInfo) -> None:
        self.login_gate.set(True)
        self.ui_state.set(
            replace(self.ui_state.value, is_login_success=True, user_info=user_info, error_msg="")
        )
