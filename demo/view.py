from client.views import BaseView
from demo.viewmodel import LoginUIState, LoginViewModel


class LoginView(BaseView[LoginViewModel]):
    """Console stand-in for the login screen."""

    def __init__(self, view_model_factory) -> None:
        super().__init__(view_model_factory)
        self.user_name = ""
        self.password = ""
        self.login_enabled = False
        self.is_loading = False
        self.last_error: str | None = None
        self.states: list[LoginUIState] = []

    def init_data(self) -> None:
        self._unsubscribers.append(self.vm.ui_state.subscribe(self.refresh_data, emit_current=False))

    def set_user_name(self, value: str) -> None:
        self.user_name = value
        self.check_input_state()

    def set_password(self, value: str) -> None:
        self.password = value
        self.check_input_state()

    def check_input_state(self) -> None:
        self.login_enabled = bool(self.user_name) and bool(self.password)

    def submit(self) -> bool:
        if not self.login_enabled:
            self.log_error("User name and password are required")
            return False
        self.vm.login(self.user_name, self.password)
        return True

    def refresh_data(self, state: LoginUIState) -> None:
        self.states.append(state)
        if state.is_login_success:
            self.log_info(f"Logged in as {state.user_info.user_name or state.user_info.user_id}")
        elif state.error_msg:
            self.show_error_view(state.error_msg)

    def show_loading(self) -> None:
        self.is_loading = True
        self.log_info("Loading...")

    def dismiss_loading(self) -> None:
        self.is_loading = False

    def show_error_view(self, message: str) -> None:
        self.last_error = message
        self.log_error(message)

    def show_main_view(self) -> None:
        self.last_error = None
