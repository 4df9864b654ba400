"""Running one app at a time in the background, started by protocol commands."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from .display import DisplayManager
from .fonts import FontRenderer, FontRom
from .protocol import CMD_RUN_APP, Packet
from .timer import Clock, monotonic_millis

log = logging.getLogger(__name__)

_MAX_APP_ID = 0xFF
_STOP_TIMEOUT = 5.0


class AppStopped(Exception):
    """Raised inside an app when it has been asked to stop."""


class AppContext:
    """What a running app sees: the displays, the font renderer, time and sleep."""

    def __init__(
        self,
        display: DisplayManager,
        renderer: FontRenderer,
        stop_event: threading.Event | None = None,
        clock: Clock = monotonic_millis,
        delay: Callable[[int], None] | None = None,
    ) -> None:
        self.display = display
        self.renderer = renderer
        self._stop = stop_event if stop_event is not None else threading.Event()
        self._clock = clock
        self._delay = delay

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def sleep(self, ms: int) -> None:
        """Pause for ``ms`` milliseconds; raise AppStopped if a stop is requested."""
        if self._stop.is_set():
            raise AppStopped
        if self._delay is None:
            interrupted = self._stop.wait(max(ms, 0) / 1000)
        else:
            self._delay(ms)
            interrupted = self._stop.is_set()
        if interrupted:
            raise AppStopped

    def millis(self) -> int:
        return self._clock()


AppFunction = Callable[[AppContext], None]


def _check_app_id(app_id: int) -> int:
    if not 0 <= app_id <= _MAX_APP_ID:
        raise ValueError(f"app id must be in 0..255, got {app_id}")
    return app_id


class AppManager:
    """Registry of apps by one-byte id; runs at most one of them at a time."""

    def __init__(
        self,
        display: DisplayManager,
        renderer: FontRenderer | None = None,
        clock: Clock = monotonic_millis,
        delay: Callable[[int], None] | None = None,
        stop_timeout: float = _STOP_TIMEOUT,
    ) -> None:
        self.display = display
        self.renderer = renderer if renderer is not None else FontRenderer(FontRom())
        self.stop_timeout = stop_timeout
        self.last_error: BaseException | None = None
        self._clock = clock
        self._delay = delay
        self._apps: dict[int, AppFunction] = {}
        self._lock = threading.RLock()
        self._thread: threading.Thread | None = None
        self._stop: threading.Event | None = None
        self._current_app_id = 0
        self._running = False

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    @property
    def current_app_id(self) -> int:
        with self._lock:
            return self._current_app_id

    def register_app(self, app_id: int, app: AppFunction) -> None:
        self._apps[_check_app_id(app_id)] = app

    def get_app(self, app_id: int) -> AppFunction | None:
        return self._apps.get(app_id)

    def run_app(self, app_id: int) -> bool:
        """Stop the current app, then start ``app_id`` if it is registered."""
        log.info("run app 0x%02X", app_id)
        self.stop_current_app()
        app = self.get_app(app_id)
        if app is None:
            return False
        stop = threading.Event()
        ctx = AppContext(self.display, self.renderer, stop, self._clock, self._delay)
        thread = threading.Thread(
            target=self._run, args=(app_id, app, ctx), name=f"app-{app_id:02X}", daemon=True
        )
        with self._lock:
            self._thread = thread
            self._stop = stop
            self._current_app_id = app_id
            self._running = True
            try:
                thread.start()
            except RuntimeError:
                log.error("failed to start app 0x%02X", app_id)
                self._thread = None
                self._stop = None
                self._running = False
                return False
        return True

    def _run(self, app_id: int, app: AppFunction, ctx: AppContext) -> None:
        log.info("app 0x%02X started", app_id)
        try:
            app(ctx)
        except AppStopped:
            pass
        except Exception as exc:
            log.exception("app 0x%02X failed", app_id)
            self.last_error = exc
        finally:
            log.info("app 0x%02X finished", app_id)
            with self._lock:
                if self._thread is threading.current_thread():
                    self._thread = None
                    self._stop = None
                    self._running = False

    def stop_current_app(self) -> bool:
        """Stop the running app and blank both displays; return whether one was running."""
        with self._lock:
            thread, stop = self._thread, self._stop
            if thread is None or stop is None:
                return False
            log.info("stopping app 0x%02X", self._current_app_id)
            self._thread = None
            self._stop = None
            self._running = False
            self._current_app_id = 0
        stop.set()
        if thread is not threading.current_thread():
            thread.join(self.stop_timeout)
            if thread.is_alive():
                log.warning("app thread %s did not stop in time", thread.name)
        self.display.clear(0x0000)
        self.display.update_displays()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the running app to end; return True if none is running afterwards."""
        with self._lock:
            thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()


class CommandExecutor:
    """Carries out the commands of parsed packets."""

    def __init__(self, manager: AppManager) -> None:
        self.manager = manager

    def execute(self, packet: Packet) -> bool:
        """Act on ``packet``; return whether it held a command that was carried out."""
        log.info("command 0x%02X with %d data bytes", packet.command, packet.data_length)
        if packet.command == CMD_RUN_APP:
            if packet.data_length < 1:
                return False
            self.manager.run_app(packet.data[0])
            return True
        log.warning("unknown command 0x%02X", packet.command)
        return False