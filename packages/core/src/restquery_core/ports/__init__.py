from .event_dispatcher import (
    EventHandler,
    EventHandlerCallable,
    EventHandlerProtocol,
    IEventDispatcher,
    IEventListener,
)
from .validation import IValidator

__all__ = [
    "EventHandler",
    "EventHandlerCallable",
    "EventHandlerProtocol",
    "IEventDispatcher",
    "IEventListener",
    "IValidator",
]
