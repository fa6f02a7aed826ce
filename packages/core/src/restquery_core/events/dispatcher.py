"""EventDispatcher — synchronous, in-process event dispatch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from ..primitives.exceptions import HttpError

if TYPE_CHECKING:
    from ..ports.event_dispatcher import EventHandler, IEventListener

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EventDispatcher(Generic[E]):
    """Local execution engine for framework events.

    Handlers run synchronously, in registration order, on the caller's
    thread. A handler exception is re-raised, aborting the
    remaining handlers of that dispatch; this is how listeners such as
    :class:`~restquery_core.serialization.listener.DenormalizationListener`
    fail the enclosing request. Unexpected exceptions are logged at ERROR
    first; :class:`HttpError` is the expected way to fail and is not.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[E], list[EventHandler[E]]] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(
        self,
        event_type: type[E],
        handler: EventHandler[E],
    ) -> None:
        """Register a handler for a specific event type."""
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def register_listener(self, listener: IEventListener) -> None:
        """Register a listener on the event type named by its ``channel``."""
        self.register(listener.channel, listener.on_event)

    # ── Dispatching ──────────────────────────────────────────────

    def dispatch(self, events: list[Any]) -> None:
        """Dispatch events to all handlers registered for their exact type."""
        for event in events:
            handlers = self._handlers.get(cast("type[E]", type(event)), [])
            for handler in list(handlers):
                self._invoke(handler, event)

    def _invoke(self, handler: EventHandler[E], event: Any) -> None:
        try:
            if hasattr(handler, "handle"):
                handler.handle(cast("E", event))
            elif callable(handler):
                handler(cast("E", event))
            else:
                raise TypeError("Handler must be a callable or have a handle() method")
        except HttpError:
            raise
        except Exception:
            logger.exception(
                "Error executing handler %s for event %s",
                getattr(handler, "__qualname__", type(handler).__name__),
                type(event).__name__,
            )
            raise

    # ── Introspection ────────────────────────────────────────────

    def get_registered_handlers(self) -> dict[type[E], list[EventHandler[E]]]:
        """Return all registered handlers (debugging utility)."""
        return {k: list(v) for k, v in self._handlers.items()}

    def clear(self) -> None:
        """Remove all handler registrations (testing utility)."""
        self._handlers.clear()
