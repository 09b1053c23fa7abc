"""The in-game calendar: thirty-day months, twelve months a year."""

from __future__ import annotations

from dataclasses import dataclass

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

# Speeds the player can step through, slowest first.
TIME_SCALES = (1.0, 2.0, 3.0, 4.0, 5.0, 10.0)


@dataclass
class GameClock:
    """Tracks the game date, whether time is paused and how fast it runs."""

    day: int
    month: int
    year: int
    paused: bool = False
    time_scale: float = 1.0
    tick_accumulator: int = 0

    def _normalise(self) -> None:
        if self.day > DAYS_PER_MONTH:
            self.advance_month()
            self.day = 1
        if self.month > MONTHS_PER_YEAR:
            self.advance_year()
            self.month = 1

    def advance_day(self) -> None:
        """Move on one day unless paused, rolling over months and years."""
        if not self.paused:
            self.day += 1
            self._normalise()

    def advance_month(self) -> None:
        """Increment the month without any rollover."""
        self.month += 1

    def advance_year(self) -> None:
        """Increment the year."""
        self.year += 1

    def advance_time(self) -> None:
        """Advance one tick of game time unless paused."""
        if not self.paused:
            self.advance_day()
            self._normalise()

    def pause(self) -> None:
        """Stop time."""
        self.paused = True

    def resume(self) -> None:
        """Let time run again."""
        self.paused = False

    def increase_time_scale(self) -> None:
        """Step up to the next speed; a stopped clock goes to normal speed."""
        if self.time_scale == 0.0:
            self.time_scale = TIME_SCALES[0]
        elif self.time_scale in TIME_SCALES:
            index = TIME_SCALES.index(self.time_scale)
            if index + 1 < len(TIME_SCALES):
                self.time_scale = TIME_SCALES[index + 1]

    def decrease_time_scale(self) -> None:
        """Step down to the previous speed, never below normal speed."""
        if self.time_scale in TIME_SCALES:
            index = TIME_SCALES.index(self.time_scale)
            if index > 0:
                self.time_scale = TIME_SCALES[index - 1]

    def date_string(self) -> str:
        """Render the date, e.g. 'Date: 1 January, 1000'."""
        if not 1 <= self.month <= MONTHS_PER_YEAR:
            raise ValueError(f"month out of range: {self.month}")
        return f"Date: {self.day} {MONTH_NAMES[self.month - 1]}, {self.year}"