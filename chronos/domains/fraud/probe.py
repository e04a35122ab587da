"""Read-only access to the visiting client's environment signals.

Checks never touch the client directly; they ask an ``EnvironmentProbe``.
``SnapshotProbe`` answers from an ``EnvironmentSnapshot`` posted by the
tracking tag and observes live interaction through an ``InteractionMonitor``.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable, Iterable
from urllib.parse import parse_qsl, urlsplit

from .models import EnvironmentSnapshot, InteractionKind

Listener = Callable[[InteractionKind, float], None]

HUMAN_INTERACTION_KINDS = (
    InteractionKind.POINTER_MOVE,
    InteractionKind.TOUCH_MOVE,
    InteractionKind.SCROLL,
)


class InteractionMonitor:
    """Fans client interaction events out to registered listeners."""

    def __init__(self) -> None:
        self._listeners: dict[InteractionKind, list[Listener]] = defaultdict(list)

    def add_listener(self, kind: InteractionKind, listener: Listener) -> None:
        self._listeners[kind].append(listener)

    def remove_listener(self, kind: InteractionKind, listener: Listener) -> None:
        listeners = self._listeners.get(kind)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, kind: InteractionKind | None = None) -> int:
        if kind is not None:
            return len(self._listeners.get(kind, []))
        return sum(len(listeners) for listeners in self._listeners.values())

    def dispatch(self, kind: InteractionKind, timestamp_ms: float | None = None) -> None:
        if timestamp_ms is None:
            timestamp_ms = time.time() * 1000
        # Copy: listeners may detach themselves while being called
        for listener in list(self._listeners.get(kind, [])):
            listener(kind, timestamp_ms)


class EnvironmentProbe(ABC):
    """Capability provider for the bot checks."""

    @abstractmethod
    def navigator_markers(self) -> set[str]: ...

    @abstractmethod
    def window_globals(self) -> set[str]: ...

    @abstractmethod
    def document_markers(self) -> set[str]: ...

    @abstractmethod
    def user_agent(self) -> str: ...

    @abstractmethod
    def platform(self) -> str: ...

    @abstractmethod
    def plugins_count(self) -> int | None: ...

    @abstractmethod
    def languages(self) -> list[str] | None: ...

    @abstractmethod
    def has_chrome_object(self) -> bool: ...

    @abstractmethod
    def has_chrome_runtime(self) -> bool: ...

    @abstractmethod
    def webgl_renderer(self) -> str | None: ...

    @abstractmethod
    def screen_size(self) -> tuple[int, int] | None: ...

    @abstractmethod
    def timezone(self) -> str | None: ...

    @abstractmethod
    def referrer(self) -> str: ...

    @abstractmethod
    def query_params(self) -> set[str]: ...

    @abstractmethod
    def cookie_enabled(self) -> bool: ...

    @abstractmethod
    def features(self) -> set[str]: ...

    @abstractmethod
    async def wait_for_interaction(self, timeout: float) -> bool:
        """Return True as soon as a human interaction is seen, False after ``timeout``."""
        ...


class SnapshotProbe(EnvironmentProbe):
    def __init__(
        self,
        snapshot: EnvironmentSnapshot,
        monitor: InteractionMonitor | None = None,
    ) -> None:
        self._snapshot = snapshot
        self._monitor = monitor or InteractionMonitor()

    @property
    def monitor(self) -> InteractionMonitor:
        return self._monitor

    def navigator_markers(self) -> set[str]:
        return set(self._snapshot.navigator_markers)

    def window_globals(self) -> set[str]:
        return set(self._snapshot.window_globals)

    def document_markers(self) -> set[str]:
        return set(self._snapshot.document_markers)

    def user_agent(self) -> str:
        return self._snapshot.user_agent

    def platform(self) -> str:
        return self._snapshot.platform

    def plugins_count(self) -> int | None:
        return self._snapshot.plugins_count

    def languages(self) -> list[str] | None:
        return self._snapshot.languages

    def has_chrome_object(self) -> bool:
        return self._snapshot.has_chrome_object

    def has_chrome_runtime(self) -> bool:
        return self._snapshot.has_chrome_runtime

    def webgl_renderer(self) -> str | None:
        return self._snapshot.webgl_renderer

    def screen_size(self) -> tuple[int, int] | None:
        width, height = self._snapshot.screen_width, self._snapshot.screen_height
        if width is None or height is None:
            return None
        return width, height

    def timezone(self) -> str | None:
        return self._snapshot.timezone

    def referrer(self) -> str:
        return self._snapshot.referrer

    def query_params(self) -> set[str]:
        query = urlsplit(self._snapshot.url).query
        return {key for key, _ in parse_qsl(query, keep_blank_values=True)}

    def cookie_enabled(self) -> bool:
        return self._snapshot.cookie_enabled

    def features(self) -> set[str]:
        return set(self._snapshot.features)

    async def wait_for_interaction(
        self,
        timeout: float,
        kinds: Iterable[InteractionKind] = HUMAN_INTERACTION_KINDS,
    ) -> bool:
        if self._snapshot.interaction_observed is not None:
            return self._snapshot.interaction_observed

        kinds = tuple(kinds)
        observed = asyncio.Event()

        def on_interaction(kind: InteractionKind, timestamp_ms: float) -> None:
            observed.set()

        for kind in kinds:
            self._monitor.add_listener(kind, on_interaction)
        try:
            await asyncio.wait_for(observed.wait(), timeout=timeout)
            return True
        except TimeoutError:
            return False
        finally:
            for kind in kinds:
                self._monitor.remove_listener(kind, on_interaction)
