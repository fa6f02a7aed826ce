from __future__ import annotations

from typing import (
    Any,
    Generic,
    Protocol,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

E = TypeVar("E")
E_contra = TypeVar("E_contra", contravariant=True)


class EventHandlerProtocol(Protocol[E_contra]):
    """
    Protocol for handler objects with a handle(event) method.

    Contravariant TypeVar ensures proper Liskov substitution:
    a handler for a supertype can be used where a handler for
    a subtype is expected.
    """

    def handle(self, event: E_contra) -> None:
        ...


class EventHandlerCallable(Protocol[E_contra]):
    def __call__(self, event: E_contra) -> None:
        ...


EventHandler: TypeAlias = EventHandlerCallable[E] | EventHandlerProtocol[E]


@runtime_checkable
class IEventListener(Protocol):
    """Handler that names the event type it subscribes to."""

    @property
    def channel(self) -> type[Any]:
        ...

    def on_event(self, event: Any) -> None:
        ...


@runtime_checkable
class IEventDispatcher(Protocol, Generic[E]):
    """Protocol for synchronous, in-process event dispatching."""

    def register(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Register a handler for a specific event type."""
        ...

    def dispatch(self, events: list[Any]) -> None:
        """Dispatch events to all registered handlers."""
        ...

    def clear(self) -> None:
        """Remove all handler registrations."""
        ...
