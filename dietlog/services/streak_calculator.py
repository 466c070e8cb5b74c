"""
Расчет лучшей серии приемов пищи в рамках диеты.

Серия - самая длинная непрерывная последовательность флагов True
во входной (хронологически упорядоченной) последовательности.
"""
from typing import AsyncIterable, Iterable


class StreakCalculator:
    """Инкрементальный подсчет: feed() на каждый флаг, result - после конца."""

    def __init__(self):
        self.current = 0
        self.best = 0

    def feed(self, is_on_diet: bool) -> None:
        if is_on_diet:
            self.current += 1
        else:
            self.best = max(self.best, self.current)
            self.current = 0

    @property
    def result(self) -> int:
        return max(self.best, self.current)


def best_streak(flags: Iterable[bool]) -> int:
    calculator = StreakCalculator()
    for flag in flags:
        calculator.feed(flag)
    return calculator.result


async def best_streak_async(flags: AsyncIterable[bool]) -> int:
    """Ошибка источника прерывает подсчет и пробрасывается, частичный результат теряется."""
    calculator = StreakCalculator()
    async for flag in flags:
        calculator.feed(flag)
    return calculator.result
