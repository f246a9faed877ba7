"""Thread use cases."""

from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase

__all__ = [
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
]
