from demo.app import DemoApp
from demo.repository import UserInfo, UserRepository
from demo.view import LoginView
from demo.viewmodel import LoginUIState, LoginViewModel

__all__ = ["DemoApp", "LoginUIState", "LoginView", "LoginViewModel", "UserInfo", "UserRepository"]
