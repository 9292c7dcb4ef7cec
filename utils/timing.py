# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Timing utilities: stopwatches, the recast debounce gate, the randomized
# hook reaction delay and the deferred-task queue drained by the tick loop.

import heapq
import itertools
import logging
import random
import time

logger = logging.getLogger("AutoHook")


def interruptible_sleep(duration, running_flag_fn):
    """Sleep that can be interrupted by checking a running flag

    Args:
        duration: Sleep duration in seconds
        running_flag_fn: Callable that returns True if should continue, False to interrupt

    Returns:
        True if completed full duration, False if interrupted
    """
    start = time.monotonic()
    while True:
        remaining = duration - (time.monotonic() - start)
        if remaining <= 0:
            return True
        if not running_flag_fn():
            return False
        time.sleep(min(0.1, remaining))  # Check at least every 100ms


class Stopwatch:
    """Start/stop/reset elapsed-time tracker on a monotonic clock"""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._started_at = None
        self._accumulated = 0.0

    @property
    def is_running(self):
        return self._started_at is not None

    def start(self):
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self):
        if self._started_at is not None:
            self._accumulated += self._clock() - self._started_at
            self._started_at = None

    def reset(self):
        """Stop and zero the stopwatch"""
        self._started_at = None
        self._accumulated = 0.0

    @property
    def elapsed(self):
        """Elapsed seconds"""
        if self._started_at is None:
            return self._accumulated
        return self._accumulated + self._clock() - self._started_at

    @property
    def elapsed_ms(self):
        return int(self.elapsed * 1000)

    def truncated_seconds(self):
        """Elapsed seconds truncated (not rounded) to two decimals"""
        return truncate_seconds(self.elapsed)


def truncate_seconds(seconds):
    return int(seconds * 100) / 100


class RecastGate:
    """Lets auto-cast logic run at most once per interval of recast-timer time

    The timer starts on first use; the gate opens once the timer has moved
    more than `interval_ms` past the previous opening.
    """

    def __init__(self, interval_ms=500, initial_tick_ms=200, clock=time.monotonic):
        self.interval_ms = interval_ms
        self._initial_tick_ms = initial_tick_ms
        self._last_tick_ms = initial_tick_ms
        self.timer = Stopwatch(clock)

    def ready(self):
        if not self.timer.is_running:
            self.timer.start()

        elapsed_ms = self.timer.elapsed_ms
        if not elapsed_ms > self._last_tick_ms + self.interval_ms:
            return False

        self._last_tick_ms = elapsed_ms
        return True

    def reset(self):
        self.timer.reset()
        self._last_tick_ms = self._initial_tick_ms


def reaction_delay(delay_min_ms, delay_max_ms, rng=random):
    """Random human reaction delay in seconds, drawn from [min, max) milliseconds"""
    if delay_max_ms <= delay_min_ms:
        return max(delay_min_ms, 0) / 1000
    return rng.randrange(delay_min_ms, delay_max_ms) / 1000


class DeferredScheduler:
    """Single-threaded timer queue

    Tasks are queued with a delay and run by `run_due()` from the same thread
    that drives the ticks, so a pending hook never blocks the tick loop and
    never runs concurrently with it.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._queue = []
        self._counter = itertools.count()

    def schedule(self, delay, fn, *args):
        due = self._clock() + max(delay, 0)
        heapq.heappush(self._queue, (due, next(self._counter), fn, args))

    def run_due(self):
        """Run every task whose due time has passed, in due order

        Returns:
            Number of tasks run
        """
        ran = 0
        now = self._clock()
        while self._queue and self._queue[0][0] <= now:
            _, _, fn, args = heapq.heappop(self._queue)
            ran += 1
            try:
                fn(*args)
            except Exception as e:
                logger.error(f"[Scheduler] Deferred task failed: {e}", exc_info=True)
        return ran

    def __len__(self):
        return len(self._queue)

    def clear(self):
        self._queue.clear()
