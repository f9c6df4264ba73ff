"""Protocol interfaces for the presentation boundary.

The core never draws anything. Hosts implement PresentationSink to learn
which entities appeared, changed or went away, and map them onto their own
display objects.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PresentationSink(Protocol):
    """Receives entity lifecycle notifications from the simulation."""

    def entity_created(self, entity: Any) -> None:
        """A slime or food item entered the world."""
        ...

    def entity_removed(self, entity: Any) -> None:
        """A slime finished dying or a food item was eaten."""
        ...

    def entity_changed(self, entity: Any) -> None:
        """An entity's state changed during a tick."""
        ...


class NullPresentationSink:
    """Sink that ignores every notification (headless runs)."""

    def entity_created(self, entity: Any) -> None:
        pass

    def entity_removed(self, entity: Any) -> None:
        pass

    def entity_changed(self, entity: Any) -> None:
        pass
