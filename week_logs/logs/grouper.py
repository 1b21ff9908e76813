import logging
from collections.abc import Iterable, Sequence

from ..errors import MalformedLogError, MalformedRow
from ..sheets.models import Cell
from .parser import Log, new_log

logger = logging.getLogger(__name__)

DAY_COLUMN = 0
DESCRIPTION_COLUMN = 1
PARTICULARITIES_COLUMN = 2
DURATION_COLUMN = 3
REQUIRED_COLUMNS = 4

WeekBucket = dict[int, list[Log]]


def _text_cell(row: Sequence[Cell], index: int) -> str:
    value = row[index]
    if not isinstance(value, str):
        raise MalformedRow(f"Column {index} holds {type(value).__name__} {value!r}, expected text")
    return value


def row_to_log(row: Sequence[Cell]) -> Log:
    """Convert one sheet row into a Log

    Columns are read positionally: day, description, particularities, duration.
    Cells after the fourth are ignored.
    """
    if len(row) < REQUIRED_COLUMNS:
        raise MalformedRow(f"Row has {len(row)} columns, expected at least {REQUIRED_COLUMNS}")

    return new_log(
        day=_text_cell(row, DAY_COLUMN),
        duration=_text_cell(row, DURATION_COLUMN),
        description=_text_cell(row, DESCRIPTION_COLUMN),
        particularities=_text_cell(row, PARTICULARITIES_COLUMN),
    )


def group_by_week(rows: Iterable[Sequence[Cell]]) -> WeekBucket:
    """Group sheet rows by the ISO week number of their day

    Stops at the first row that cannot be parsed; nothing is returned in
    that case.
    """
    weeks: WeekBucket = {}
    for row_number, row in enumerate(rows, start=1):
        try:
            log = row_to_log(row)
        except MalformedLogError as e:
            logger.debug(f"Rejecting row {row_number}: {e}")
            raise type(e)(f"Row {row_number}: {e}") from e

        week = log.day.isocalendar().week
        weeks.setdefault(week, []).append(log)

    logger.info(f"Grouped {sum(len(logs) for logs in weeks.values())} logs into {len(weeks)} weeks")
    return weeks
