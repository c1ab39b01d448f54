"""Window for the snake game: drawing, menus, keys and the tick timer."""

from __future__ import annotations

from typing import Optional, Sequence

from snakegrid.config import (
    CELL,
    CELL_X,
    CELL_Y,
    DELTA_X,
    DELTA_Y,
    DOWN,
    GAME_X,
    GAME_Y,
    LEFT,
    RIGHT,
    SCELL,
    SCORE_LABEL_SIZE,
    UP,
    WINDOW_X,
    WINDOW_Y,
    map_walls,
)
from snakegrid.game import Game, Status

TITLE = "Snakegame GUI"
VERSION_TEXT = "Snakegame GUI V0.2"

MANUAL = (
    "A snakegame for tutorial.\n\n"
    "Operations:\n"
    "W: moving up\n"
    "S: moving down\n"
    "A: moving left\n"
    "D: moving right\n"
    "Space: game pause\n\n"
    "Food of some color has special effect\n"
    "Red: None\n"
    "Gold: Extra score bonus\n"
    "Blue: 10s invicibility(able to cross yourself and wall)\n"
    "Purple: Random reduce to your length(1~4)\n"
)

_KEYS = {"w": UP, "s": DOWN, "a": LEFT, "d": RIGHT}
_DIFFICULTIES = (("Easy", 1), ("Medium", 2), ("Hard", 3), ("Expert", 4))
_MAPS = (("Borderless", 0), ("Classic Box", 1), ("Trail Station", 2))

_BORDER_COLOR = "#a0a0a4"
_WALL_COLOR = "#39cfbb"
_HEAD_COLOR = "#808080"


def food_color(food_type: int) -> str:
    """Fill colour of a food of the given kind."""
    if food_type == 11:
        return "blue"
    if food_type == 10:
        return "#800080"
    if food_type == 9:
        return "yellow"
    return "red"


def food_size(food_type: int) -> int:
    """Diameter in pixels of a food of the given kind."""
    return 23 if food_type < 9 else 27


def cell_rect(x: int, y: int, size: int) -> tuple[int, int, int, int]:
    """Pixel rectangle (left, top, width, height) of a square centred in a cell."""
    offset = (CELL - size) // 2
    return (x * CELL + DELTA_X + offset, y * CELL + DELTA_Y + offset, size, size)


def _corner(x: int, y: int) -> tuple[int, int]:
    return x * CELL + DELTA_X, y * CELL + DELTA_Y


class SnakeApp:
    """A Tk window that plays a Game."""

    def __init__(self, game: Optional[Game] = None) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.game = game if game is not None else Game()
        self._after_id: Optional[str] = None

        root = tk.Tk()
        self.root = root
        root.title(TITLE)
        root.geometry(f"{WINDOW_X}x{WINDOW_Y}")
        root.resizable(False, False)

        self._difficulty = tk.IntVar(value=self.game.difficulty)
        self._map = tk.IntVar(value=self.game.new_map_id)
        self._build_menus()

        height = GAME_Y + DELTA_Y + DELTA_X
        self.canvas = tk.Canvas(root, width=WINDOW_X, height=height, highlightthickness=0)
        self.canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self.start_button = tk.Button(self.canvas, text="Start game", command=self._on_start)
        self._button_item = self.canvas.create_window(
            DELTA_X + GAME_X // 2, DELTA_Y + GAME_Y // 2, window=self.start_button
        )

        bar = tk.Frame(root, relief=tk.SUNKEN, borderwidth=1)
        bar.pack(side=tk.BOTTOM, fill=tk.X)
        self.score_label = tk.Label(bar, text="", font=("TkDefaultFont", SCORE_LABEL_SIZE))
        self.score_label.pack(side=tk.LEFT)
        tk.Label(bar, text=VERSION_TEXT).pack(side=tk.RIGHT)

        root.bind("<KeyPress>", self._on_key)
        root.focus_set()

    def _build_menus(self) -> None:
        tk = self._tk
        bar = tk.Menu(self.root)

        self._difficulty_menu = tk.Menu(bar, tearoff=False)
        for label, level in _DIFFICULTIES:
            self._difficulty_menu.add_radiobutton(
                label=label,
                variable=self._difficulty,
                value=level,
                command=lambda lv=level: self.game.set_difficulty(lv),
            )
        bar.add_cascade(label="Difficulty", menu=self._difficulty_menu)

        self._map_menu = tk.Menu(bar, tearoff=False)
        for label, map_id in _MAPS:
            self._map_menu.add_radiobutton(
                label=label,
                variable=self._map,
                value=map_id,
                command=lambda m=map_id: self.game.set_map(m),
            )
        bar.add_cascade(label="Map", menu=self._map_menu)

        help_menu = tk.Menu(bar, tearoff=False)
        help_menu.add_command(label="Game manual", command=self._show_manual)
        help_menu.add_command(label="About", command=self._show_about)
        bar.add_cascade(label="Help", menu=help_menu)

        self.root.config(menu=bar)

    def _set_settings_enabled(self, enabled: bool) -> None:
        state = self._tk.NORMAL if enabled else self._tk.DISABLED
        for menu, count in ((self._difficulty_menu, len(_DIFFICULTIES)), (self._map_menu, len(_MAPS))):
            for index in range(count):
                menu.entryconfigure(index, state=state)

    def _show_manual(self) -> None:
        self._messagebox.showinfo("Game manual", MANUAL, parent=self.root)

    def _show_about(self) -> None:
        self._messagebox.showinfo("About", VERSION_TEXT, parent=self.root)

    def _schedule(self) -> None:
        self._cancel()
        self._after_id = self.root.after(self.game.interval, self._on_timer)

    def _cancel(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def _on_start(self) -> None:
        self.game.start()
        self.canvas.itemconfigure(self._button_item, state="hidden")
        self._set_settings_enabled(False)
        self._refresh()
        self._schedule()

    def _on_timer(self) -> None:
        self._after_id = None
        outcome = self.game.tick()
        self._refresh()
        if outcome is not None:
            self._messagebox.showwarning("Game Over", outcome.message, parent=self.root)
            self.canvas.itemconfigure(self._button_item, state="normal")
            self._set_settings_enabled(True)
            self._refresh()
        elif self.game.status is Status.RUNNING:
            self._schedule()

    def _on_key(self, event) -> None:
        key = event.keysym.lower()
        if key in _KEYS:
            self.game.steer(_KEYS[key])
        elif key == "space":
            before = self.game.status
            after = self.game.toggle_pause()
            if after is Status.PAUSED:
                self._cancel()
            elif before is Status.PAUSED and after is Status.RUNNING:
                self._schedule()
            self.score_label.config(text=self.game.label)

    def _refresh(self) -> None:
        self.score_label.config(text=self.game.label)
        self.canvas.delete("scene")
        if self.game.status is Status.IDLE:
            return
        self._draw()

    def _draw(self) -> None:
        canvas = self.canvas
        game = self.game

        fx, fy = game.food
        size = food_size(game.food_type)
        left, top = fx * CELL + DELTA_X, fy * CELL + DELTA_Y
        canvas.create_oval(
            left, top, left + size, top + size,
            fill=food_color(game.food_type), outline="black", tags="scene",
        )

        for x1, y1, x2, y2 in (
            (0, 0, CELL_X, 0),
            (0, 0, 0, CELL_Y),
            (0, CELL_Y, CELL_X, CELL_Y),
            (CELL_X, 0, CELL_X, CELL_Y),
        ):
            canvas.create_line(*_corner(x1, y1), *_corner(x2, y2), fill=_BORDER_COLOR, width=2, tags="scene")

        for wall in map_walls(game.map_id):
            canvas.create_line(
                *_corner(wall.x1, wall.y1), *_corner(wall.x2, wall.y2),
                fill=_WALL_COLOR, width=7, tags="scene",
            )

        if not game.snake.body:
            return
        head = game.snake.body[0]
        body_color = "blue" if game.inv_count else "black"
        for node in game.snake.body:
            if node != head:
                self._draw_cell(node, body_color)
        self._draw_cell(head, _HEAD_COLOR)

    def _draw_cell(self, node: tuple[int, int], color: str) -> None:
        left, top, width, height = cell_rect(node[0], node[1], SCELL)
        self.canvas.create_rectangle(
            left, top, left + width, top + height,
            fill=color, outline=_BORDER_COLOR, tags="scene",
        )

    def run(self) -> None:
        """Show the window and run until it is closed."""
        self.root.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window."""
    SnakeApp().run()
    return 0