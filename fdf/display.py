"""Windows with per-event hooks and an event loop that dispatches to them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, Tuple

from fdf.image import Image

MAX_EVENT = 36
_RGB_MASK = 0xFFFFFF


class EventType(IntEnum):
    """Event numbers as used by the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    EXPOSE = 12
    DESTROY_NOTIFY = 17
    CONFIGURE_NOTIFY = 22
    CLIENT_MESSAGE = 33


@dataclass(frozen=True)
class Event:
    """One input or window event aimed at a window.

    ``close_request`` marks a client message asking the window to close.
    ``count`` is the number of expose events still to follow.
    """

    type: int
    window: "Window"
    keycode: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


Hook = Tuple[Callable[..., Any], Any]


class Window:
    """A drawable window: a 24-bit framebuffer, drawn text and event hooks."""

    def __init__(self, width: int, height: int, title: str = "") -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.framebuffer = Image(width, height)
        self.texts: List[Tuple[int, int, int, str]] = []
        self.hooks: Dict[int, Hook] = {}

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Set one pixel to 0xRRGGBB; points outside the window are clipped."""
        if self._inside(x, y):
            self.framebuffer.put_pixel(x, y, color & _RGB_MASK)

    def clear(self) -> None:
        """Fill the window with the black background and drop drawn text."""
        self.framebuffer = Image(self.width, self.height)
        self.texts.clear()

    def string_put(self, x: int, y: int, color: int, text: str) -> None:
        """Record *text* drawn with its baseline starting at (x, y)."""
        self.texts.append((x, y, color & _RGB_MASK, text))

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy *image* with its top-left corner at (x, y), clipped to the window."""
        for src_y in range(max(0, -y), min(image.height, self.height - y)):
            for src_x in range(max(0, -x), min(image.width, self.width - x)):
                self.framebuffer.put_pixel(
                    x + src_x, y + src_y, image.get_pixel(src_x, src_y)
                )

    def hook(self, event: int, func: Callable[..., Any], param: Any = None) -> None:
        """Call *func* with *param* whenever *event* reaches this window."""
        number = int(event)
        if not 0 <= number < MAX_EVENT:
            raise ValueError(f"event number out of range: {number}")
        if not callable(func):
            raise TypeError("hook must be callable")
        self.hooks[number] = (func, param)

    def key_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Hook key releases: ``func(keycode, param)``."""
        self.hook(EventType.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Hook button presses: ``func(button, x, y, param)``."""
        self.hook(EventType.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Hook exposure: ``func(param)``."""
        self.hook(EventType.EXPOSE, func, param)


class Display:
    """Owns windows, queues events and runs the event loop.

    ``event_source``, when given, is called once per loop turn with an
    empty queue and returns the next events to deliver.
    """

    def __init__(
        self, event_source: Optional[Callable[[], Iterable[Event]]] = None
    ) -> None:
        self.event_source = event_source
        self._windows: List[Window] = []
        self._queue: Deque[Event] = deque()
        self._loop_hook: Optional[Hook] = None
        self._ended = False

    @property
    def windows(self) -> Tuple[Window, ...]:
        """Open windows, most recently created first."""
        return tuple(self._windows)

    def _has(self, window: Window) -> bool:
        return any(w is window for w in self._windows)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued."""
        window = Window(width, height, title)
        self._windows.insert(0, window)
        self.post(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close *window*; events still queued for it are ignored."""
        if not self._has(window):
            raise ValueError("window does not belong to this display")
        self._windows = [w for w in self._windows if w is not window]

    def post(self, event: Event) -> None:
        """Queue an event for the loop."""
        self._queue.append(event)

    def loop_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(param)`` after each batch of pending events."""
        if not callable(func):
            raise TypeError("hook must be callable")
        self._loop_hook = (func, param)

    def dispatch(self, event: Event) -> bool:
        """Deliver one event to its window's hooks; True if a hook ran."""
        window = event.window
        if not self._has(window):
            return False
        called = False
        if event.type == EventType.CLIENT_MESSAGE and event.close_request:
            destroy = window.hooks.get(EventType.DESTROY_NOTIFY)
            if destroy is not None:
                destroy[0](destroy[1])
                called = True
        if self._has(window) and 0 <= event.type < MAX_EVENT:
            hook = window.hooks.get(event.type)
            if hook is not None and self._deliver(event, *hook):
                called = True
        return called

    @staticmethod
    def _deliver(event: Event, func: Callable[..., Any], param: Any) -> bool:
        kind = event.type
        if kind < EventType.KEY_PRESS:
            return False
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            func(event.keycode, param)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            func(event.button, event.x, event.y, param)
        elif kind == EventType.MOTION_NOTIFY:
            func(event.x, event.y, param)
        elif kind == EventType.EXPOSE:
            if event.count:
                return False
            func(param)
        else:
            func(param)
        return True

    def loop(self) -> int:
        """Deliver events until no window is left or the loop is ended.

        Without a loop hook or an event source, the loop returns once the
        queue is empty, as nothing further could arrive.
        """
        while self._windows and not self._ended:
            if not self._queue and self.event_source is not None:
                self._queue.extend(self.event_source())
            while not self._ended and self._queue:
                self.dispatch(self._queue.popleft())
            if self._loop_hook is not None:
                func, param = self._loop_hook
                func(param)
            elif self.event_source is None and not self._queue:
                break
        return 0

    def loop_end(self) -> None:
        """Make the running loop return after the current event."""
        self._ended = True