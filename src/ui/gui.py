"""
Segmented Display GUI - tkinter Front End
Canvas painter, display widgets and a small demo window for the display engine
"""

import tkinter as tk
from tkinter import messagebox, Menu
import time
from dataclasses import replace
from typing import Optional, Sequence, Union

from segments import (
    DisplayKind, MetricsPreset, SegmentedDisplay, StylePreset, Rect, Painter, ANIMATIONS,
)
from segments.style import Color, Stroke, blend_over, to_hex

from .preferences import PreferencesManager


class CanvasPainter(Painter):
    """
    Painter that draws onto a tkinter Canvas.

    Tk colors have no alpha channel, so translucent fills and outlines are
    composited over `background` before they reach the canvas.
    """

    def __init__(self, canvas: tk.Canvas, background: Color = (0, 0, 0, 255)):
        self.canvas = canvas
        self.background = blend_over(background, (0, 0, 0, 255))

    def _color(self, color: Color) -> str:
        if color[3] == 0:
            return ''
        return to_hex(blend_over(color, self.background))

    def _outline(self, stroke: Stroke):
        if not stroke.visible:
            return '', 0
        return self._color(stroke.color), stroke.width

    def allocate_rect(self, desired_size) -> Rect:
        width, height = desired_size
        self.canvas.config(width=int(round(width)), height=int(round(height)))
        return Rect.from_size(desired_size)

    def draw_polygon(self, points, fill: Color, stroke: Stroke):
        outline, width = self._outline(stroke)
        coords = [value for point in points for value in point]
        self.canvas.create_polygon(coords, fill=self._color(fill), outline=outline, width=width)

    def draw_circle(self, center, radius: float, fill: Color, stroke: Stroke):
        outline, width = self._outline(stroke)
        x, y = center
        self.canvas.create_oval(x - radius, y - radius, x + radius, y + radius,
                                fill=self._color(fill), outline=outline, width=width)


class SegmentedDisplayCanvas(tk.Canvas):
    """Canvas showing one SegmentedDisplay row, sized to fit it"""

    def __init__(self, parent, display: Optional[SegmentedDisplay] = None, **kwargs):
        kwargs.setdefault('highlightthickness', 0)
        kwargs.setdefault('bd', 0)
        super().__init__(parent, **kwargs)
        self.display = display or SegmentedDisplay()
        self.redraw()

    def set_display(self, display: SegmentedDisplay):
        """Replace the shown row and repaint"""
        self.display = display
        self.redraw()

    def redraw(self):
        self.delete('all')
        background = self.display.current_style.background_color
        self.config(bg=to_hex(blend_over(background, (0, 0, 0, 255))))
        self.display.paint(CanvasPainter(self, background))


def format_counter(num: int, width: int) -> str:
    """Format number with leading zeros for a fixed-width counter"""
    if width < 1:
        raise ValueError(f"Invalid counter width: {width}. Must be at least 1.")

    if num < 0:
        if width == 1 or abs(num) >= 10**(width-1):  # If too large to fit with minus sign
            return '-' + '9' * (width-1)
        return f"-{abs(num):0{width-1}d}"

    if num >= 10**width:  # If too large to fit
        return '9' * width

    return f"{num:0{width}d}"


def blink_colons(display: SegmentedDisplay, lit: bool) -> SegmentedDisplay:
    """Switch the colon dots on or off without changing the digit count"""
    display.digits = [replace(digit, colon=digit.colon and lit) for digit in display.digits]
    return display


class DigitalDisplay(SegmentedDisplayCanvas):
    """Fixed-width numeric counter, e.g. a timer or a score"""

    def __init__(self, parent, width: int = 3, display_kind: Union[DisplayKind, str] = DisplayKind.SEVEN_SEGMENT,
                 style_preset: Union[StylePreset, str] = StylePreset.DEFAULT, digit_height: float = 32.0):
        if width < 1:
            raise ValueError(f"Invalid counter width: {width}. Must be at least 1.")

        self.width = width
        self.value = 0
        self.display_kind = DisplayKind.from_name(display_kind)
        self.style_preset = StylePreset.from_name(style_preset)
        self.digit_height = digit_height
        super().__init__(parent, self._build(0))

    def _build(self, value: int) -> SegmentedDisplay:
        return (SegmentedDisplay(self.display_kind)
                .style_preset(self.style_preset)
                .digit_height(self.digit_height)
                .show_dots(False)
                .show_colons(False)
                .show_apostrophes(False)
                .push_string(format_counter(value, self.width)))

    def set_value(self, value: int):
        """Update the display value"""
        self.value = value
        self.set_display(self._build(value))

    def set_style_preset(self, preset: Union[StylePreset, str]):
        self.style_preset = StylePreset.from_name(preset)
        self.set_value(self.value)


class SegmentedDisplayGUI:
    """Demo window: free text, a live clock, an uptime counter and an animation"""

    TICK_MS = 100

    def __init__(self, preferences: Optional[PreferencesManager] = None):
        self.root = tk.Tk()
        self.root.title('Segmented Display')
        self.root.resizable(False, False)

        self.preferences = preferences or PreferencesManager()
        self.start_time = time.time()
        self.frame_index = 0
        self.tick_id: Optional[str] = None

        # Tk variables mirroring the saved preferences
        self.kind_var = tk.StringVar(value=self.preferences.display_kind().value)
        self.style_var = tk.StringVar(value=self.preferences.style_preset().value)
        self.metrics_var = tk.StringVar(value=self.preferences.metrics_preset().value)
        self.animation_var = tk.StringVar(value=self.preferences.get_preference("animation"))
        self.text_var = tk.StringVar(value=self.preferences.get_preference("text"))
        self.dots_var = tk.BooleanVar(value=self.preferences.get_preference("show_dots"))
        self.colons_var = tk.BooleanVar(value=self.preferences.get_preference("show_colons"))
        self.apostrophes_var = tk.BooleanVar(value=self.preferences.get_preference("show_apostrophes"))

        # GUI components
        self.text_display: Optional[SegmentedDisplayCanvas] = None
        self.clock_display: Optional[SegmentedDisplayCanvas] = None
        self.uptime_display: Optional[DigitalDisplay] = None
        self.animation_display: Optional[SegmentedDisplayCanvas] = None
        self._setup_gui()
        self._tick()

    def _setup_gui(self):
        """Setup the main GUI components"""
        main_frame = tk.Frame(self.root, bg='lightgray', relief='raised', bd=3)
        main_frame.pack(padx=5, pady=5)

        # Text entry and the row it drives
        entry = tk.Entry(main_frame, textvariable=self.text_var, width=32)
        entry.pack(fill='x', padx=5, pady=5)
        self.text_var.trace_add('write', lambda *args: self._on_text_changed())

        self.text_display = SegmentedDisplayCanvas(main_frame, self._build_row(self.text_var.get()))
        self.text_display.pack(padx=5, pady=5)

        # Clock on the left, uptime counter and animation on the right
        bottom_frame = tk.Frame(main_frame, bg='lightgray')
        bottom_frame.pack(fill='x', padx=5, pady=5)

        self.clock_display = SegmentedDisplayCanvas(bottom_frame, self._build_clock())
        self.clock_display.pack(side='left')

        self.animation_display = SegmentedDisplayCanvas(bottom_frame, self._build_animation())
        self.animation_display.pack(side='right')

        self.uptime_display = DigitalDisplay(bottom_frame, width=4, style_preset=self.style_var.get(),
                                             digit_height=self._digit_height() / 2)
        self.uptime_display.pack(side='right', padx=5)

        self._setup_menu()

    def _setup_menu(self):
        """Setup the menu bar"""
        menubar = Menu(self.root)
        self.root.config(menu=menubar)

        display_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Display", menu=display_menu)
        for kind in DisplayKind:
            display_menu.add_radiobutton(label=kind.label, value=kind.value, variable=self.kind_var,
                                         command=lambda: self._on_choice("display_kind", self.kind_var))
        display_menu.add_separator()
        display_menu.add_checkbutton(label="Show Dots", variable=self.dots_var,
                                     command=lambda: self._on_choice("show_dots", self.dots_var))
        display_menu.add_checkbutton(label="Show Colons", variable=self.colons_var,
                                     command=lambda: self._on_choice("show_colons", self.colons_var))
        display_menu.add_checkbutton(label="Show Apostrophes", variable=self.apostrophes_var,
                                     command=lambda: self._on_choice("show_apostrophes", self.apostrophes_var))
        display_menu.add_separator()
        display_menu.add_command(label="Reset Preferences", command=self._reset_preferences)
        display_menu.add_command(label="Exit", command=self.root.quit)

        style_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Style", menu=style_menu)
        for preset in StylePreset:
            style_menu.add_radiobutton(label=preset.display_name, value=preset.value, variable=self.style_var,
                                       command=lambda: self._on_choice("style_preset", self.style_var))

        metrics_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Metrics", menu=metrics_menu)
        for preset in MetricsPreset:
            metrics_menu.add_radiobutton(label=preset.display_name, value=preset.value, variable=self.metrics_var,
                                         command=lambda: self._on_choice("metrics_preset", self.metrics_var))

        animation_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Animation", menu=animation_menu)
        for name in ANIMATIONS:
            animation_menu.add_radiobutton(label=name.replace('_', ' ').title(), value=name,
                                           variable=self.animation_var,
                                           command=lambda: self._on_choice("animation", self.animation_var))

        help_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="About", command=self._show_about)

    def _digit_height(self) -> float:
        return self.preferences.digit_height()

    def _configure(self, display: SegmentedDisplay) -> SegmentedDisplay:
        return (display
                .digit_height(self._digit_height())
                .style_preset(self.style_var.get())
                .metrics_preset(self.metrics_var.get())
                .show_dots(self.dots_var.get())
                .show_colons(self.colons_var.get())
                .show_apostrophes(self.apostrophes_var.get()))

    def _build_row(self, text: str) -> SegmentedDisplay:
        """A row in the selected kind; flags are applied before the text is pushed"""
        return self._configure(SegmentedDisplay(self.kind_var.get())).push_string(text)

    def _build_animation(self) -> SegmentedDisplay:
        frames: Sequence[int] = ANIMATIONS.get(self.animation_var.get(), ANIMATIONS['spinner_3'])
        glyph = frames[self.frame_index % len(frames)]
        return self._configure(SegmentedDisplay(DisplayKind.SIXTEEN_SEGMENT)).push_glyph(glyph)

    def _build_clock(self) -> SegmentedDisplay:
        """Current time, colons blinking once a second"""
        now = time.time()
        row = self._build_row(time.strftime('%H:%M:%S', time.localtime(now)))
        return blink_colons(row, lit=not int(now) % 2)

    def _on_text_changed(self):
        self.preferences.set_preference("text", self.text_var.get())
        self.text_display.set_display(self._build_row(self.text_var.get()))

    def _on_choice(self, key: str, variable: tk.Variable):
        """Persist a menu choice and repaint every row"""
        self.preferences.set_preference(key, variable.get())
        self._refresh()

    def _refresh(self):
        self.text_display.set_display(self._build_row(self.text_var.get()))
        self.clock_display.set_display(self._build_clock())
        self.animation_display.set_display(self._build_animation())
        self.uptime_display.set_style_preset(self.style_var.get())

    def _reset_preferences(self):
        self.preferences.reset()
        self.kind_var.set(self.preferences.display_kind().value)
        self.style_var.set(self.preferences.style_preset().value)
        self.metrics_var.set(self.preferences.metrics_preset().value)
        self.animation_var.set(self.preferences.get_preference("animation"))
        self.dots_var.set(self.preferences.get_preference("show_dots"))
        self.colons_var.set(self.preferences.get_preference("show_colons"))
        self.apostrophes_var.set(self.preferences.get_preference("show_apostrophes"))
        self.text_var.set(self.preferences.get_preference("text"))
        self._refresh()

    def _tick(self):
        """Advance the clock, the uptime counter and the animation"""
        self.frame_index += 1
        self.clock_display.set_display(self._build_clock())
        self.animation_display.set_display(self._build_animation())

        elapsed = int(time.time() - self.start_time)
        if elapsed != self.uptime_display.value:
            self.uptime_display.set_value(elapsed)

        # Schedule next update
        self.tick_id = self.root.after(self.TICK_MS, self._tick)

    def _show_about(self):
        """Show about dialog"""
        about_text = """Segmented Display

Seven, nine and sixteen segment displays
drawn from procedurally generated segments

Created with Python and tkinter"""

        messagebox.showinfo("About Segmented Display", about_text)

    def run(self):
        """Start the GUI main loop"""
        self.root.mainloop()
