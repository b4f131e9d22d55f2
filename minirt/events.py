"""Windows, event hooks and the event loop that drives them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Deque, Dict, List, Optional, Tuple

from minirt.display import Canvas

MAX_EVENT = 36

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17


class EventType(IntEnum):
    """Event codes understood by windows."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


@dataclass
class Event:
    """One input or window event addressed to ``window``."""

    type: int
    window: Optional["Window"] = None
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_request: bool = False


_KEY_EVENTS = frozenset({EventType.KEY_PRESS, EventType.KEY_RELEASE})
_BUTTON_EVENTS = frozenset({EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE})
_UNDEFINED_EVENTS = frozenset({0, 1})


@dataclass(eq=False)
class Window:
    """A window with a drawing canvas and one hook per event type."""

    width: int
    height: int
    title: str = ""
    canvas: Canvas = field(init=False)
    _hooks: Dict[int, Tuple[Callable, int]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.canvas = Canvas(self.width, self.height)

    def hook(self, event_type: int, mask: int, callback: Callable) -> None:
        """Call ``callback`` for events of ``event_type``, listening with ``mask``."""
        if not 0 <= event_type < MAX_EVENT:
            raise ValueError(f"event type must be between 0 and {MAX_EVENT - 1}")
        self._hooks[int(event_type)] = (callback, mask)

    def key_hook(self, callback: Callable[[int], object]) -> None:
        """Call ``callback(keysym)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, callback)

    def mouse_hook(self, callback: Callable[[int, int, int], object]) -> None:
        """Call ``callback(button, x, y)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, callback)

    def expose_hook(self, callback: Callable[[], object]) -> None:
        """Call ``callback()`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, callback)

    def event_mask(self) -> int:
        """Return the union of the masks of every hook."""
        mask = 0
        for _, hook_mask in self._hooks.values():
            mask |= hook_mask
        return mask

    def dispatch(self, event: Event) -> bool:
        """Pass ``event`` to its hooks; return True if any hook was called."""
        called = False
        if event.type == EventType.CLIENT_MESSAGE and event.delete_request:
            destroy = self._hooks.get(EventType.DESTROY_NOTIFY)
            if destroy is not None:
                destroy[0]()
                called = True
        if not 0 <= event.type < MAX_EVENT or event.type in _UNDEFINED_EVENTS:
            return called
        entry = self._hooks.get(int(event.type))
        if entry is None:
            return called
        callback = entry[0]
        if event.type in _KEY_EVENTS:
            callback(event.keysym)
        elif event.type in _BUTTON_EVENTS:
            callback(event.button, event.x, event.y)
        elif event.type == EventType.MOTION_NOTIFY:
            callback(event.x, event.y)
        elif event.type == EventType.EXPOSE:
            if event.count:
                return called
            callback()
        else:
            callback()
        return True


@dataclass
class EventLoop:
    """Holds the open windows and delivers queued events to them."""

    windows: List[Window] = field(default_factory=list, init=False)
    _queue: Deque[Event] = field(default_factory=deque, init=False, repr=False)
    _loop_hook: Optional[Callable[[], object]] = field(default=None, init=False, repr=False)
    _ended: bool = field(default=False, init=False, repr=False)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued straight away."""
        window = Window(width, height, title)
        self.windows.insert(0, window)
        self.post(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window``; events still queued for it are ignored."""
        try:
            self.windows.remove(window)
        except ValueError:
            raise ValueError("window does not belong to this loop") from None

    def loop_hook(self, callback: Optional[Callable[[], object]]) -> None:
        """Call ``callback()`` after each batch of pending events."""
        self._loop_hook = callback

    def post(self, event: Event) -> None:
        """Queue ``event`` for delivery."""
        self._queue.append(event)

    def flush(self) -> int:
        """Discard every pending event and return how many there were."""
        discarded = len(self._queue)
        self._queue.clear()
        return discarded

    def end(self) -> None:
        """Make ``run`` return once the current callback finishes."""
        self._ended = True

    def _deliver(self, event: Event) -> None:
        window = event.window
        if window is not None and window in self.windows and 0 <= event.type < MAX_EVENT:
            window.dispatch(event)

    def run(self) -> None:
        """Deliver events until ended, every window is closed, or nothing is left.

        Without a loop hook the loop returns as soon as the queue is empty,
        since no further event can arrive.
        """
        while self.windows and not self._ended:
            while not self._ended and self._queue:
                self._deliver(self._queue.popleft())
            if self._loop_hook is None:
                return
            if not self._ended:
                self._loop_hook()