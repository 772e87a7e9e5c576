# === FILE: member_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска скрапера MemberScout через командную строку.

Опции:
  --url, -u URL                 Начальный URL (обязателен, если не задан в конфиге)
  --csv, -c PATH                CSV-файл или "stdout" (default: stdout)
  --max-records, -m INT         Лимит записей, 0 - без ограничений (default: 0)
  --timeout, -t SEC             Таймаут одной попытки запроса (default: 30)
  --retries-on-timeout, -r INT  Число попыток при таймауте (default: 3)
  --config PATH                 YAML/JSON-конфиг; опции CLI имеют приоритет
  --user-agent STR              Заголовок User-Agent (default: "Mozilla 5.0")
  --quiet, -q                   Не выводить строку прогресса
  --log-level LEVEL             Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH               Файл для логов (только stderr, если не указан)
  --log-format FORMAT           Формат логирования

Дополнительно:
  --version, -v                 Показать версию MemberScout

Пример:
  member_scout --url https://example.org/socios --csv socios.csv --max-records 100
"""
import asyncio
import csv
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from member_scout import __version__
from member_scout.config import load_config
from member_scout.logger import DEFAULT_FORMAT, init_logging
from member_scout.progress import ConsoleProgress
from member_scout.report.csv_report import render_csv
from member_scout.scanner import start_scrape

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='MemberScout, version %(version)s')
@click.option('--url', '-u', 'seed_url', default=None, help='Начальный URL обхода.')
@click.option(
    '--csv', '-c', 'csv_target',
    default=None,
    help='Путь к CSV-файлу или "stdout"  [default: stdout]'
)
@click.option(
    '--max-records', '-m', 'max_records',
    type=click.IntRange(min=0),
    default=None,
    help='Макс. число записей, 0 - без ограничений  [default: 0]'
)
@click.option(
    '--timeout', '-t', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут одной попытки запроса, секунд  [default: 30]'
)
@click.option(
    '--retries-on-timeout', '-r', 'retries_on_timeout',
    type=click.IntRange(min=1),
    default=None,
    help='Число попыток при таймауте  [default: 3]'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent  [default: Mozilla 5.0]')
@click.option('--quiet', '-q', is_flag=True, help='Не выводить строку прогресса')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
def cli(seed_url, csv_target, max_records, timeout, retries_on_timeout, config_path,
        user_agent, quiet, log_level, log_file, log_format):
    """Обойти каталог участников и выгрузить карточки в CSV."""
    logger = init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    overrides = {
        'seed_url': seed_url,
        'csv': csv_target,
        'max_records': max_records,
        'timeout': timeout,
        'retries_on_timeout': retries_on_timeout,
        'user_agent': user_agent,
    }
    try:
        cfg = load_config(config_path, overrides)
    except (ValidationError, ValueError, TypeError, FileNotFoundError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    progress = None if quiet else ConsoleProgress()
    try:
        result = asyncio.run(start_scrape(cfg, progress=progress))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')
    finally:
        if progress is not None:
            progress.finish()

    if result.failures:
        logger.warning("%d URL(s) failed, see errors above", len(result.failures))

    # Ошибка записи CSV фатальна: неполная таблица хуже остановки
    try:
        render_csv(result.records, cfg.csv, cfg.labels)
    except (OSError, csv.Error) as e:
        print_error(f'Error writing to CSV file: {e}')


if __name__ == "__main__":
    cli()
