# member_scout/report/csv_report.py

"""
Генерация CSV-отчёта для проекта MemberScout.

Все поля в кавычках, заголовок из меток полей сайта. При пустом списке
записей ничего не пишется: ни заголовок, ни файл.
"""
import csv
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO, Union

from member_scout.config import CSV_STDOUT, FieldLabels
from member_scout.crawler.models import EnterpriseRecord
from member_scout.logger import logger


@contextmanager
def open_sink(target: Union[str, Path]) -> Iterator[TextIO]:
    """Открывает приёмник: stdout (не закрывается) или файл в UTF-8."""
    if str(target) == CSV_STDOUT:
        yield sys.stdout
        sys.stdout.flush()
        return

    output = Path(target)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8", newline="") as fh:
        yield fh


def render_csv(
    records: Sequence[EnterpriseRecord],
    target: Union[str, Path],
    labels: Optional[FieldLabels] = None,
) -> int:
    """
    Записывает records в CSV и возвращает число строк данных.

    Ошибки записи (OSError, csv.Error) не перехватываются: CLI считает их
    фатальными.

    Пример:
    ```python
    from member_scout.report.csv_report import render_csv
    render_csv(result.records, 'out/socios.csv')
    ```
    """
    if not records:
        logger.info("No records collected, CSV output skipped")
        return 0

    header = (labels or FieldLabels()).csv_header()
    with open_sink(target) as sink:
        writer = csv.writer(sink, quoting=csv.QUOTE_ALL, doublequote=True, lineterminator="\n")
        writer.writerow(header)
        for record in records:
            writer.writerow(record.as_row())

    logger.info("CSV written to %s: %d record(s)", target, len(records))
    return len(records)
