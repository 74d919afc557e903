"""Multicast callbacks: bind listeners, then broadcast to all of them."""

from __future__ import annotations

from typing import Any, Callable


class Delegate:
    """An ordered list of callbacks invoked together by broadcast."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def bind(self, callback: Callable[..., Any]) -> None:
        self._callbacks.append(callback)

    def unbind(self, callback: Callable[..., Any]) -> None:
        """Remove the first bound callback equal to the given one, if any."""
        for index, bound in enumerate(self._callbacks):
            if bound == callback:
                del self._callbacks[index]
                return

    def broadcast(self, *args: Any) -> None:
        for callback in self._callbacks:
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)