from kivy.uix.button import Button
from kivy.uix.widget import Widget
from kivy.properties import NumericProperty, ListProperty, BooleanProperty
from kivy.graphics import Color, RoundedRectangle, Ellipse

COLLECTION_COLORS = {
    "red": (0.85, 0.30, 0.30, 1),
    "blue": (0.25, 0.52, 0.90, 1),
    "green": (0.30, 0.70, 0.40, 1),
    "purple": (0.58, 0.36, 0.80, 1),
    "orange": (0.93, 0.60, 0.25, 1),
}


def collection_rgba(name: str):
    return COLLECTION_COLORS.get((name or "").lower(), COLLECTION_COLORS["blue"])


class RoundedButton(Button):
    corner_radius = NumericProperty(12)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._fill = tuple(self.background_color)
        # own canvas replaces the default texture
        self.background_normal = ""
        self.background_down = ""
        self.background_color = (0, 0, 0, 0)
        with self.canvas.before:
            self._fill_instr = Color(*self._fill)
            self._rect = RoundedRectangle(pos=self.pos, size=self.size, radius=[self.corner_radius])
        self.bind(pos=self._update_canvas, size=self._update_canvas, state=self._update_canvas,
                  corner_radius=self._update_canvas)

    def set_fill(self, rgba):
        self._fill = tuple(rgba)
        self._update_canvas()

    def _update_canvas(self, *_):
        r, g, b, a = self._fill
        if self.state == "down":
            r, g, b = r * 0.8, g * 0.8, b * 0.8
        self._fill_instr.rgba = (r, g, b, a)
        self._rect.pos = self.pos
        self._rect.size = self.size
        self._rect.radius = [self.corner_radius]


class TabPill(RoundedButton):
    selected = BooleanProperty(False)
    selected_color = ListProperty([1, 1, 1, 0.14])
    idle_color = ListProperty([0, 0, 0, 0])

    def __init__(self, **kwargs):
        kwargs.setdefault("corner_radius", 20)
        super().__init__(**kwargs)
        self.bind(selected=lambda *_: self._sync())
        self._sync()

    def _sync(self):
        self.set_fill(self.selected_color if self.selected else self.idle_color)
        self.color = (0.95, 0.98, 1, 1) if self.selected else (0.70, 0.74, 0.80, 1)


class ColorDot(Widget):
    rgba = ListProperty([0.25, 0.52, 0.90, 1])

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        with self.canvas:
            self._color = Color(*self.rgba)
            self._dot = Ellipse(pos=self.pos, size=self.size)
        self.bind(pos=self._redraw, size=self._redraw, rgba=self._redraw)

    def _redraw(self, *_):
        self._color.rgba = self.rgba
        d = min(self.width, self.height)
        self._dot.size = (d, d)
        self._dot.pos = (self.x, self.center_y - d / 2.0)
