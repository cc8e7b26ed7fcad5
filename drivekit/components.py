"""Drawable shapes and the UI components built on them: graphics, backgrounds and buttons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from drivekit.constants import ComponentKind
from drivekit.ui_util import IdAllocator

_DEFAULT_IDS = IdAllocator()
_BUTTON_COOLDOWN_MS = 200


class Drawable(ABC):
    """Something with a position and size that can draw itself.

    Subclasses provide ``x``, ``y``, ``width`` and ``height`` attributes.
    """

    x: int
    y: int
    width: int
    height: int

    @abstractmethod
    def render(self):
        """Draw the shape."""

    def set_position(self, x, y):
        self.x = x
        self.y = y


@dataclass(eq=False)
class Box(Drawable):
    """A filled rectangle; rendering records it on ``surface``."""

    x: int
    y: int
    width: int
    height: int
    color: str = "#ffffff"
    surface: list = field(default_factory=list)

    def render(self):
        self.surface.append((self.x, self.y, self.width, self.height, self.color))


class _Component:
    """Common identity and one-shot redraw flag of UI components."""

    def __init__(self, kind, allocator=None, toggle_group=0):
        ids = allocator if allocator is not None else _DEFAULT_IDS
        self.id = ids.create(kind, toggle_group)
        self._needs_render_update = False

    def _take_update(self):
        if self._needs_render_update:
            self._needs_render_update = False
            return True
        return False


class Graphic(_Component):
    """A group of drawables moved and sized together by their bounding box."""

    def __init__(self, drawables=(), allocator=None):
        super().__init__(ComponentKind.GRAPHIC, allocator)
        if isinstance(drawables, Drawable):
            drawables = [drawables]
        self._drawables = list(drawables)
        self._x = self._y = self._w = self._h = 0
        if self._drawables:
            self.calculate_bounds()

    @property
    def drawables(self):
        return tuple(self._drawables)

    def __len__(self):
        return len(self._drawables)

    def calculate_bounds(self):
        """Set position and size to the bounding box of the drawables."""
        if not self._drawables:
            raise ValueError("graphic has no drawables")
        min_x = min(d.x for d in self._drawables)
        min_y = min(d.y for d in self._drawables)
        max_x = max(d.x + d.width for d in self._drawables)
        max_y = max(d.y + d.height for d in self._drawables)
        self._x, self._y = min_x, min_y
        self._w, self._h = max_x - min_x, max_y - min_y

    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        delta = value - self._x
        for d in self._drawables:
            d.x += delta
        self._needs_render_update = True
        self._x = value

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        delta = value - self._y
        for d in self._drawables:
            d.y += delta
        self._needs_render_update = True
        self._y = value

    @property
    def width(self):
        return self._w

    @width.setter
    def width(self, value):
        delta = value - self._w
        for d in self._drawables:
            d.width += delta
        self._w = value

    @property
    def height(self):
        return self._h

    @height.setter
    def height(self, value):
        delta = value - self._h
        for d in self._drawables:
            d.height += delta
        self._h = value

    def set_position(self, x, y):
        self.x = x
        self.y = y

    def add_graphic(self, drawable):
        self._drawables.append(drawable)
        self._needs_render_update = True

    def replace_graphic(self, drawables):
        """Replace all drawables with one drawable or a sequence of them."""
        if isinstance(drawables, Drawable):
            drawables = [drawables]
        self._drawables = list(drawables)
        self._needs_render_update = True

    def remove_first_graphic(self):
        if not self._drawables:
            raise IndexError("graphic has no drawables")
        del self._drawables[0]
        self._needs_render_update = True

    def needs_update(self):
        """True once after any change that requires a redraw."""
        return self._take_update()

    def render(self):
        for d in self._drawables:
            d.render()


class Background(_Component):
    """A drawable whose position may be set only once."""

    def __init__(self, drawable, allocator=None):
        super().__init__(ComponentKind.BACKGROUND, allocator)
        self._drawable = drawable
        self._position_is_set = False

    @property
    def drawable(self):
        return self._drawable

    @property
    def x(self):
        return self._drawable.x

    @x.setter
    def x(self, value):
        if not self._position_is_set:
            self._drawable.x = value
        self._needs_render_update = True
        self._position_is_set = True

    @property
    def y(self):
        return self._drawable.y

    @y.setter
    def y(self, value):
        if not self._position_is_set:
            self._drawable.y = value
        self._needs_render_update = True
        self._position_is_set = True

    @property
    def width(self):
        return self._drawable.width

    @property
    def height(self):
        return self._drawable.height

    def set_position(self, x, y):
        if not self._position_is_set:
            self._drawable.x = x
            self._drawable.y = y
        self._position_is_set = True

    def needs_update(self):
        return self._take_update()

    def render(self):
        self._drawable.render()


class ButtonState(Enum):
    INACTIVE = "inactive"
    PRESSING = "pressing"
    TRIGGERED = "triggered"


class Button(_Component):
    """A clickable drawable with optional pressing and triggered looks.

    Hits are tested against the area the button had when created, moved by
    later position changes.
    """

    def __init__(self, drawable, on_click=None, allocator=None):
        super().__init__(ComponentKind.BUTTON, allocator)
        self._graphic = drawable
        self._pressing_graphic = None
        self._triggered_graphic = None
        self.on_click = on_click
        self.state = ButtonState.INACTIVE
        self._prev_state = ButtonState.INACTIVE
        self._pressed = False
        self._cooldown = False
        self._initial_ms = 0
        self._x = drawable.x
        self._y = drawable.y
        self._w = drawable.width
        self._h = drawable.height

    @property
    def x(self):
        return self._graphic.x

    @x.setter
    def x(self, value):
        self._graphic.x = value
        delta = value - self._x
        for extra in (self._pressing_graphic, self._triggered_graphic):
            if extra is not None:
                extra.x += delta
        self._needs_render_update = True
        self._pressed = False
        self._x = value

    @property
    def y(self):
        return self._graphic.y

    @y.setter
    def y(self, value):
        self._graphic.y = value
        delta = value - self._y
        for extra in (self._pressing_graphic, self._triggered_graphic):
            if extra is not None:
                extra.y += delta
        self._needs_render_update = True
        self._pressed = False
        self._y = value

    @property
    def width(self):
        return self._graphic.width

    @property
    def height(self):
        return self._graphic.height

    def set_position(self, x, y):
        self.x = x
        self.y = y

    def set_states(self, pressing_state=None, triggered_state=None):
        """Set the drawables shown while pressing and once triggered; None keeps the old one."""
        if pressing_state is not None:
            self._pressing_graphic = pressing_state
        if triggered_state is not None:
            self._triggered_graphic = triggered_state

    def set_callback(self, callback):
        self.on_click = callback

    def needs_update(self):
        if self.state is not self._prev_state:
            self._needs_render_update = True
        self._prev_state = self.state
        return self._take_update()

    def render(self):
        if self.state is ButtonState.PRESSING and self._pressing_graphic is not None:
            self._pressing_graphic.render()
        elif self.state is ButtonState.TRIGGERED and self._triggered_graphic is not None:
            self._triggered_graphic.render()
        else:
            self._graphic.render()

    def _contains(self, px, py):
        return self._x <= px <= self._x + self._w and self._y <= py <= self._y + self._h

    def _cooling_down(self, now_ms):
        if self._cooldown and now_ms - self._initial_ms <= _BUTTON_COOLDOWN_MS:
            return True
        self._cooldown = False
        return False

    def _start_cooldown(self, now_ms):
        self._cooldown = True
        self._initial_ms = now_ms

    def handle_touch(self, touch_x, touch_y, pressing, now_ms):
        """Update the state from a touchscreen sample; clicks fire on release inside."""
        if self._cooling_down(now_ms):
            return
        within = self._contains(touch_x, touch_y)
        if pressing:
            if not self._pressed and within:
                self._pressed = True
                self.state = ButtonState.PRESSING
            elif self._pressed and not within:
                self._pressed = False
                self.state = ButtonState.INACTIVE
        elif self._pressed:
            self._pressed = False
            self.state = ButtonState.TRIGGERED
            if within and self.on_click is not None:
                self.on_click()
            self._start_cooldown(now_ms)
        else:
            self.state = ButtonState.INACTIVE

    def handle_cursor(self, cursor_x, cursor_y, select_pressed, now_ms):
        """Update the state from a controller cursor; selecting inside clicks at once."""
        if self._cooling_down(now_ms):
            return
        within = self._contains(cursor_x, cursor_y)
        if select_pressed and within:
            self.state = ButtonState.TRIGGERED
            if self.on_click is not None:
                self.on_click()
            self._start_cooldown(now_ms)
        elif within:
            self.state = ButtonState.PRESSING
        else:
            self.state = ButtonState.INACTIVE