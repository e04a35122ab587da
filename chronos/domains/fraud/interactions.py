"""Rolling pointer and keyboard timing histories for a session."""

import statistics
from collections import deque
from collections.abc import Iterable

from .config import FraudConfig, default_config
from .models import InteractionKind, InteractionPatterns
from .probe import InteractionMonitor


def _interval_stddev(timestamps: Iterable[float]) -> float:
    """Population standard deviation of the gaps between consecutive events."""
    ordered = list(timestamps)
    if len(ordered) < 2:
        return 0.0
    deltas = [later - earlier for earlier, later in zip(ordered, ordered[1:])]
    return statistics.pstdev(deltas)


class InteractionTracker:
    """Keeps the most recent pointer-move and key-press timestamps.

    Histories are bounded (100 pointer events, 50 key presses by default);
    older events fall off the front.
    """

    def __init__(self, config: FraudConfig | None = None) -> None:
        cfg = config or default_config
        self._pointer: deque[float] = deque(maxlen=cfg.interaction.pointer_history_size)
        self._keys: deque[float] = deque(maxlen=cfg.interaction.key_history_size)
        self._monitor: InteractionMonitor | None = None

    def record_pointer_move(self, timestamp_ms: float) -> None:
        self._pointer.append(timestamp_ms)

    def record_key_press(self, timestamp_ms: float) -> None:
        self._keys.append(timestamp_ms)

    def attach(self, monitor: InteractionMonitor) -> None:
        """Start recording events dispatched through ``monitor``."""
        self.detach()
        monitor.add_listener(InteractionKind.POINTER_MOVE, self._on_pointer)
        monitor.add_listener(InteractionKind.KEY_DOWN, self._on_key)
        self._monitor = monitor

    def detach(self) -> None:
        if self._monitor is None:
            return
        self._monitor.remove_listener(InteractionKind.POINTER_MOVE, self._on_pointer)
        self._monitor.remove_listener(InteractionKind.KEY_DOWN, self._on_key)
        self._monitor = None

    def patterns(self) -> InteractionPatterns:
        return InteractionPatterns(
            pointer_interval_stddev_ms=_interval_stddev(self._pointer),
            key_interval_stddev_ms=_interval_stddev(self._keys),
            pointer_event_count=len(self._pointer),
            key_event_count=len(self._keys),
        )

    def _on_pointer(self, kind: InteractionKind, timestamp_ms: float) -> None:
        self.record_pointer_move(timestamp_ms)

    def _on_key(self, kind: InteractionKind, timestamp_ms: float) -> None:
        self.record_key_press(timestamp_ms)
