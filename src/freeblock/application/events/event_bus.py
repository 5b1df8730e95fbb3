"""
Event Bus System

Provides publish/subscribe pattern for domain events.
Allows renderers and other components to react to block graph changes.

Dispatch is synchronous: publish() returns after every handler has run.
A failing handler is logged and skipped so later handlers still run and
the store that published the event is never left half-updated.
"""
from typing import Dict, List, Callable, Union, Type
from threading import Lock

from freeblock.application.events.events import DomainEvent
from freeblock.utils.message import Log


class EventBus:
    """
    Event bus for publishing and subscribing to domain events.
    
    Usage:
        bus = EventBus()
        bus.subscribe("blockCreated", handle_block_created)
        # Or with class:
        bus.subscribe(BlockCreated, handle_block_created)
        bus.publish(BlockCreated(data={"block": block}))
    """
    
    def __init__(self):
        """Initialize event bus"""
        self._subscribers: Dict[str, List[Callable[[DomainEvent], None]]] = {}
        self._lock = Lock()
        Log.debug("EventBus: Initialized")
    
    def _normalize_event_name(self, event_name_or_class: Union[str, Type[DomainEvent]]) -> str:
        """Convert event class or string to normalized string name."""
        if isinstance(event_name_or_class, str):
            return event_name_or_class
        elif hasattr(event_name_or_class, 'name'):
            return event_name_or_class.name
        elif hasattr(event_name_or_class, '__name__'):
            return event_name_or_class.__name__
        else:
            return str(event_name_or_class)
    
    def subscribe(self, event_name: Union[str, Type[DomainEvent]], handler: Callable[[DomainEvent], None]) -> None:
        """
        Subscribe to events of a specific type.
        
        Args:
            event_name: Name of the event type (e.g., "blockCreated") or event class
            handler: Function to call when event is published
                Must accept DomainEvent as parameter
        """
        event_name = self._normalize_event_name(event_name)
        with self._lock:
            if event_name not in self._subscribers:
                self._subscribers[event_name] = []
            
            if handler not in self._subscribers[event_name]:
                self._subscribers[event_name].append(handler)
    
    def unsubscribe(self, event_name: Union[str, Type[DomainEvent]], handler: Callable[[DomainEvent], None]) -> None:
        """
        Unsubscribe from events of a specific type.
        
        Args:
            event_name: Name of the event type or event class
            handler: Handler function to remove
        """
        event_name = self._normalize_event_name(event_name)
        with self._lock:
            if event_name in self._subscribers:
                if handler in self._subscribers[event_name]:
                    self._subscribers[event_name].remove(handler)
                    
                    # Clean up empty lists
                    if not self._subscribers[event_name]:
                        del self._subscribers[event_name]
    
    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event to all subscribers, in registration order.
        
        Args:
            event: DomainEvent instance to publish
        """
        event_name = event.name if hasattr(event, 'name') else type(event).__name__
        
        # Copy so handlers may (un)subscribe while being dispatched
        with self._lock:
            handlers = self._subscribers.get(event_name, []).copy()
        
        if not handlers:
            return
        
        Log.debug(f"EventBus: Publishing '{event_name}' to {len(handlers)} subscribers")
        
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                Log.error(f"EventBus: Error in handler for '{event_name}': {e}")
    
    def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple events in order.
        
        Args:
            events: List of DomainEvent instances
        """
        for event in events:
            self.publish(event)
    
    def get_subscriber_count(self, event_name: Union[str, Type[DomainEvent]]) -> int:
        """
        Get number of subscribers for an event type.
        
        Args:
            event_name: Name of the event type or event class
            
        Returns:
            Number of subscribers
        """
        event_name = self._normalize_event_name(event_name)
        with self._lock:
            return len(self._subscribers.get(event_name, []))
    
    def clear(self) -> None:
        """Clear all subscribers"""
        with self._lock:
            self._subscribers.clear()
            Log.debug("EventBus: Cleared all subscribers")
