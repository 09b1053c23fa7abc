# denarius

A small kingdom-management game that runs in your terminal. You rule five
provinces, set how hard each one is taxed, and watch your treasury of
denars change as the calendar ticks forward.

## Installing

```
pip install .
```

The game draws with `curses`, so it needs a terminal that supports it
(any ordinary Linux or macOS terminal will do).

## Playing

```
denarius
```

The main menu offers:

- **Start the game**: opens the kingdom screen with a new kingdom.
- **Settings**: selecting it does nothing.
- **Credits**: shows who made the game; press Enter to go back.
- **Exit**: leaves the game.

Use the up and down arrow keys to move and Enter to choose.

### The kingdom screen

- **Manage an economy**: opens the province list, showing each province's
  population and income. Up and down move between provinces, left and
  right switch between `+` and `-`, Enter raises or lowers that province's
  tax rate (five steps, from 0.00001 to 0.00005 denars per inhabitant),
  and Esc returns.
- **Show stats**: shows your denars and the number of provinces; any key
  returns.
- **Exit to the menu**: returns to the main menu.

While on the kingdom screen:

- Space pauses and resumes time.
- Right and left arrows speed time up or slow it down
  (1x, 2x, 3x, 4x, 5x, 10x). At 1x one game day passes each second.

Each game month has 30 days and each year 12 months. Whenever the
calendar shows the first day of a month not yet taxed (including the very
start of the game), every province's income is collected and the month's
income minus expenses is added to your treasury.

## Using the pieces

The game model is plain Python and can be used without a terminal:

```python
from denarius.economy import Economy
from denarius.province import Province
from denarius.kingdom import Kingdom
from denarius.gameclock import GameClock

kingdom = Kingdom("My Kingdom", Economy(1000, 100, 50),
                  [Province("Pekhla", 77500), Province("Okinas", 59700)])
kingdom.collect_income()
print(kingdom.display_denars())      # Denars: ...
print(kingdom.display_provinces())   # Provinces: 2

clock = GameClock(1, 1, 1000)
clock.advance_day()
print(clock.date_string())           # Date: 2 January, 1000
```

- `Economy` keeps `denars` and the month's pending `income` and
  `expenses`; `update_monthly()` settles them, `take_loan()` adds denars
  at once.
- `Province` has `name`, `population`, `income` and a `multiplier`
  changed with `increase_multiplier()` and `decrease_multiplier()`.
- `GameClock` advances days with rollover, can be paused and resumed, and
  steps its `time_scale` with `increase_time_scale()` and
  `decrease_time_scale()`.
- `Kingdom` also has `manage_economy()`, a curses screen offering a
  50-denar loan; it must be called from inside a running curses session.

## What the game does not do

- There is no saving or loading; each game starts afresh.
- The Settings entry has no settings behind it.
- The kingdom screen does not lead to the loan screen, and the
  "Lower the taxes" entry on that screen does nothing.
- Apart from the starting amount, nothing in play adds expenses.

## Running the tests

```
pip install .[test]
pytest
```