"""Frame loop driver: bounded frame deltas and per-frame re-arming."""

from typing import Callable

from ..constants import MAX_FRAME_DELTA

FrameCallback = Callable[[float], None]
FrameScheduler = Callable[[FrameCallback], None]


class LoopDriver:
    """
    Runs one simulation step and one render step per display frame.

    The host supplies a one-shot scheduler, e.g. a wrapper around its
    "run on next frame" primitive. Every tick re-arms itself through it
    until stop() is called.
    """

    def __init__(
        self,
        simulate: Callable[[float], None],
        render: Callable[[], None],
        schedule: FrameScheduler,
    ):
        """
        Args:
            simulate: Advances the game by a delta in seconds
            render: Draws the state the simulation just produced
            schedule: Arms a callback for the next frame timestamp
        """
        self.simulate = simulate
        self.render = render
        self.schedule = schedule
        self.last_timestamp: float | None = None
        self.running = False

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self.schedule(self.tick)

    def stop(self) -> None:
        """Stop re-arming. A frame already scheduled becomes a no-op."""
        self.running = False

    def frame_delta(self, timestamp: float) -> float:
        """
        Convert a millisecond timestamp into a simulation delta in seconds.

        The first timestamp only sets the baseline and yields 0. Later deltas
        are clamped into [0, MAX_FRAME_DELTA], so a stalled host never
        produces a huge jump and a clock going backwards never runs time
        in reverse.
        """
        last = self.last_timestamp
        self.last_timestamp = timestamp
        if last is None:
            return 0.0
        return min(max((timestamp - last) / 1000, 0.0), MAX_FRAME_DELTA)

    def tick(self, timestamp: float) -> None:
        if not self.running:
            return
        delta_time = self.frame_delta(timestamp)
        self.simulate(delta_time)
        self.render()
        if self.running:
            self.schedule(self.tick)


class ManualFrameScheduler:
    """Holds the armed callback until the caller supplies the next frame time."""

    def __init__(self) -> None:
        self._pending: FrameCallback | None = None

    def __call__(self, callback: FrameCallback) -> None:
        self._pending = callback

    @property
    def armed(self) -> bool:
        return self._pending is not None

    def run_frame(self, timestamp: float) -> bool:
        """Fire the armed callback once. Returns False when nothing was armed."""
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback(timestamp)
        return True
