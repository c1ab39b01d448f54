# snakegrid

A classic snake game in a desktop window. The snake moves on a 40 × 26 grid. The window is built with Tk, so your Python needs `tkinter`.

## Running

Install the package and start the game:

    pip install .
    snakegrid

Use the **Difficulty** menu (Easy, Medium, Hard, Expert) and the **Map** menu (Borderless, Classic Box, Trail Station) to set up a game. Then press **Start game**. These menus are disabled while a game is running. The **Help** menu has a game manual and an About box.

The difficulty sets the tick length: 120, 100, 75 or 50 ms. The defaults are Expert and Borderless.

## Controls

| Key   | Action           |
|-------|------------------|
| W     | move up          |
| S     | move down        |
| A     | move left        |
| D     | move right       |
| Space | pause and resume |

The snake cannot turn straight back on itself.

## Maps

On every map the snake wraps around the edges of the grid.

- **Borderless**: no walls.
- **Classic Box**: a wall runs along all four edges of the field.
- **Trail Station**: corner brackets and two long bars across the middle.

The game ends when the snake hits a wall or its own body. A message box then shows the reason and the score.

## Foods

Eating a food scores as many points as the difficulty level. Some foods also have a special effect:

- **Red**: no effect.
- **Gold**: an extra `level × (level - 1)` points.
- **Purple**: the snake loses 1 to 4 segments. Its length never drops below 2.
- **Blue**: invincibility for 10000 ms worth of ticks. The snake can pass through walls and through itself, and its body is drawn in blue.

## High scores

The best score for each map is stored in `scores.txt` in the working directory. The file is read when a game is created. Each line has the form `MapName:score`, and the map names are `Borderless`, `Classic_Box` and `Trail_Station`. The file is rewritten, sorted by map name, whenever a game beats that map's best. If the file is missing, or cannot be read or written, it is ignored.

## Using the game model

The game logic does not depend on the window, so you can drive it directly:

```python
from snakegrid.game import Game

game = Game()
game.set_difficulty(2)
game.set_map(1)
game.start()
game.steer(3)          # 0 up, 1 down, 2 left, 3 right
outcome = game.tick()  # a GameOver when the game ends, otherwise None
print(game.map_name(), game.score)
```

- `Game.toggle_pause()` pauses or resumes the game.
- `Game.status` is a `Status` value: `RUNNING`, `IDLE` or `PAUSED`.
- `Game` accepts its own `ScoreManager` and a random source, such as a seeded `random.Random`.
- `snakegrid.snake.Snake` is the snake model. `Snake.move()` returns a `MoveResult`.
- `snakegrid.scores.ScoreManager` loads, queries and updates the high-score table.
- `snakegrid.config.map_walls()` returns the wall segments of each map.
- `snakegrid.config.tick_interval()` returns the tick length for a difficulty level.