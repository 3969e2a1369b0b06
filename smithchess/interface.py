"""Mouse and screen state for the board window: selection, hover and frame rate."""

from __future__ import annotations

from .position import BOARD_SIZE, is_valid

_DEFAULT_SIZE = 32 * BOARD_SIZE
_DEFAULT_TIME_PERIOD = 0.2  # five frames a second
NO_POSITION = -1


class Interface:
    """Tracks where the user is pointing and which squares are selected.

    Positions are board locations 0..63, or -1 for nothing. Screen
    coordinates have their origin at the top left, as a window system
    reports mouse events.
    """

    def __init__(self, width: int = _DEFAULT_SIZE, height: int = _DEFAULT_SIZE) -> None:
        self.width = width
        self.height = height
        self.hover_position = NO_POSITION
        self.select_position = NO_POSITION
        self.previous_position = NO_POSITION
        self.time_period = _DEFAULT_TIME_PERIOD

    @property
    def frame_rate(self) -> float:
        """The interval between frame draws, in seconds."""
        return self.time_period

    def square_width(self) -> float:
        """Width in pixels of one board square."""
        return self.width / BOARD_SIZE

    def square_height(self) -> float:
        """Height in pixels of one board square."""
        return self.height / BOARD_SIZE

    def set_screen(self, width: int, height: int) -> None:
        """Record a new window size."""
        self.width = width
        self.height = height

    def position_from_xy(self, x: float, y: float) -> int:
        """The board location under screen point (x, y), or -1 if off the board."""
        col = int(x / self.square_width())
        row = BOARD_SIZE - 1 - int(y / self.square_height())
        return row * BOARD_SIZE + col if is_valid(row, col) else NO_POSITION

    def set_select_position(self, pos: int) -> None:
        """Select a square, remembering the previously selected one."""
        if pos != self.select_position:
            self.previous_position = self.select_position
        self.select_position = pos

    def clear_select_position(self) -> None:
        """Drop both the current and the previous selection."""
        self.previous_position = NO_POSITION
        self.select_position = NO_POSITION

    def clear_previous_position(self) -> None:
        """Forget the previously selected square."""
        self.previous_position = NO_POSITION

    def set_hover_position(self, pos: int) -> None:
        self.hover_position = pos

    def click(self, x: float, y: float) -> None:
        """Handle a left click: toggle the selection of the square clicked."""
        pos = self.position_from_xy(x, y)
        if self.select_position == pos:
            self.clear_select_position()
        else:
            self.set_select_position(pos)

    def hover(self, x: float, y: float) -> None:
        """Handle the mouse moving over the window."""
        self.set_hover_position(self.position_from_xy(x, y))

    def set_frames_per_second(self, value: float) -> None:
        """Set how many frames a second are drawn."""
        if value <= 0:
            raise ValueError(f"frames per second must be positive, not {value}")
        self.time_period = 1.0 / value