"""
Login state used to intercept requests that need an authenticated user.

Set it after the application starts or after a successful login. While it is
unset (``None``) no request is blocked.
"""


class LoginGate:
    def __init__(self, is_login: bool | None = None) -> None:
        self._is_login = is_login

    def get(self) -> bool | None:
        return self._is_login

    def set(self, is_login: bool) -> None:
        self._is_login = is_login

    def reset(self) -> None:
        self._is_login = None

    def blocks(self, requires_login: bool) -> bool:
        """Only an explicit ``False`` blocks; an unknown state lets requests through."""
        return requires_login and self._is_login is False


login_gate = LoginGate()


def get_login_gate() -> LoginGate:
    return login_gate
