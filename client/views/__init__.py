from client.views.base import BaseView

__all__ = ["BaseView"]
