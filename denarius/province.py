"""Provinces and the taxes they yield."""

from __future__ import annotations

MULTIPLIER_STEP = 0.00001
MIN_LEVEL = 1
MAX_LEVEL = 5


class Province:
    """A province whose income is its population times a tax multiplier."""

    def __init__(self, name: str, population: int) -> None:
        self.name = name
        self.population = population
        self._level = MIN_LEVEL
        self.income = 0.0
        self.update_income()

    def __repr__(self) -> str:
        return (
            f"Province(name={self.name!r}, population={self.population}, "
            f"multiplier={self.multiplier})"
        )

    @property
    def multiplier(self) -> float:
        """The tax multiplier applied to the population."""
        return self._level * MULTIPLIER_STEP

    def update_income(self) -> float:
        """Recompute the income from the population and return it."""
        self.income = self.population * self.multiplier
        return self.income

    def increase_multiplier(self) -> None:
        """Raise taxes by one step, up to the maximum."""
        if self._level < MAX_LEVEL:
            self._level += 1
            self.update_income()

    def decrease_multiplier(self) -> None:
        """Lower taxes by one step, down to the minimum."""
        if self._level > MIN_LEVEL:
            self._level -= 1
            self.update_income()