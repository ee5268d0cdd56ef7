from client.repositories.base import BaseRepository

__all__ = ["BaseRepository"]
