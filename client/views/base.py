import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from client.viewmodels.base import BaseViewModel
from core.models.network import RequestError


class BaseView[VM: BaseViewModel](ABC):
    """Base class for all views: binds a view model's state to the view hooks."""

    def __init__(self, view_model_factory: Callable[[], VM]) -> None:
        """
        Initialize a new instance of the BaseView class.

        Args:
            view_model_factory: Builds the view model when the view starts
        """
        self.view_model_factory = view_model_factory
        self.view_model: VM | None = None
        self.logger = logging.getLogger(type(self).__name__)
        self._unsubscribers: list[Callable[[], None]] = []

    @property
    def vm(self) -> VM:
        if self.view_model is None:
            raise RuntimeError(f"{type(self).__name__} is not started")
        return self.view_model

    def start(self) -> None:
        """Create the view model, register its state and run ``init_data``."""
        if self.view_model is not None:
            return
        self.view_model = self.view_model_factory()
        self._register_events()
        self.init_data()

    def stop(self) -> None:
        """Drop the subscriptions and clear the view model."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        if self.view_model is not None:
            self.view_model.clear()
            self.view_model = None

    def _register_events(self) -> None:
        vm = self.vm
        self._unsubscribers += [
            vm.normal.subscribe(self._on_normal, emit_current=False),
            vm.error.subscribe(self._on_error, emit_current=False),
            vm.loading.subscribe(self._on_loading, emit_current=False),
        ]

    def _on_normal(self, _: bool) -> None:
        self.show_main_view()

    def _on_error(self, error: RequestError | None) -> None:
        if error is not None and error.message:
            self.show_error_view(error.message)

    def _on_loading(self, loading: bool) -> None:
        if loading:
            self.show_loading()
        else:
            self.dismiss_loading()

    def log_info(self, text: str) -> None:
        self.logger.info(text)

    def log_error(self, text: str) -> None:
        self.logger.error(text)

    # ——— Hooks ———
    def show_main_view(self) -> None:
        pass

    def show_error_view(self, message: str) -> None:
        pass

    def show_loading(self) -> None:
        pass

    def dismiss_loading(self) -> None:
        pass

    @abstractmethod
    def init_data(self) -> None:
        """Subclass initialization entry."""
        raise NotImplementedError
