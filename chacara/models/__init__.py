from chacara.models.task import TaskRow
from chacara.models.logs import DailyLogRow

__all__ = [
    "TaskRow",
    "DailyLogRow",
]
