from client.viewmodels.base import BaseViewModel
from client.viewmodels.scope import WorkerScope

__all__ = ["BaseViewModel", "WorkerScope"]
