#!/usr/bin/env python3
"""
Print the tasks for a month from whichever store the app would use.

Usage:
    python scripts/run_month_report.py            # current month
    python scripts/run_month_report.py 2024 9     # September 2024
"""
import asyncio
import logging
import sys
from datetime import date

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from chacara.core.config import settings
from chacara.core.labels import CATEGORY_LABELS, MONTH_NAMES
from chacara.services import projections
from chacara.services.board import TaskBoard
from chacara.services.relevance import YearMonth
from chacara.stores import open_store


def _line(task) -> str:
    mark = "x" if task.is_completed else " "
    when = task.specific_date.strftime("%d/%m") if task.specific_date else "--/--"
    return f"  [{mark}] {when}  {task.title}  ({CATEGORY_LABELS[task.category.value]})"


async def main(year: int, month: int) -> None:
    store = await open_store(settings)
    try:
        board = TaskBoard(store)
        await board.load()
        view = projections.calendar_month(board.snapshot(), YearMonth(year, month))
    finally:
        await store.close()

    print(f"\n{MONTH_NAMES[month - 1]} {year}\n")
    print("Sazonal:")
    for task in view.seasonal:
        print(_line(task))
    print("\nPor dia:")
    for cell in view.days:
        for task in cell.tasks:
            print(f"  {cell.day:2d} " + _line(task).lstrip())


if __name__ == "__main__":
    today = date.today()
    args = [int(a) for a in sys.argv[1:3]]
    year, month = (args + [today.year, today.month][len(args):])[:2]
    asyncio.run(main(year, month))
