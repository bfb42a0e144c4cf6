# === FILE: site_meta/cli.py ===
#!/usr/bin/env python3
"""
Точка входа SiteMeta: обход sitemap сайта и выгрузка title/description страниц.

Команды:
  crawl URL   Обойти URL/sitemap.xml и сохранить CSV-отчёт
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --output PATH       Имя CSV-файла (по умолчанию website_meta_<host>_<дата>.csv)
  --json PATH         Дополнительно сохранить JSON-отчёт
  --html PATH         Дополнительно сохранить HTML-отчёт
  --concurrency INT   Число одновременных загрузок страниц (override)
  --timeout SEC       Таймаут одного запроса (override)
  --no-progress       Не показывать прогресс-бар

Дополнительно:
  --version, -v       Показать версию SiteMeta

Пример:
  site-meta crawl https://example.com --output example.csv
"""
import asyncio
import sys
import time
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from site_meta import __version__
from site_meta.config import load_config, with_overrides
from site_meta.errors import SitemapError
from site_meta.logger import DEFAULT_FORMAT, init_logging
from site_meta.report.csv_report import render_csv
from site_meta.report.html_report import render_html
from site_meta.report.json_report import render_json
from site_meta.scanner import start_crawl
from site_meta.utils import default_report_name, is_valid_url

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


class _ProgressBar:
    """Подписчик на прогресс пайплайна: бар создаётся, когда известен total."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._bar = None

    def __call__(self, completed: int, total: int) -> None:
        if not self.enabled:
            return
        if self._bar is None:
            self._bar = click.progressbar(length=total, label='Pages', file=sys.stderr)
        self._bar.update(1)

    def finish(self) -> None:
        if self._bar is not None:
            self._bar.render_finish()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMeta, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteMeta CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Имя CSV-файла отчёта'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--concurrency', '-n', 'concurrency',
    type=click.IntRange(1, 64),
    default=None,
    help='Число одновременных загрузок страниц'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=None,
    help='Таймаут одного запроса (секунд)'
)
@click.option(
    '--no-progress', is_flag=True,
    help='Не показывать прогресс-бар'
)
@click.pass_context
def crawl(ctx, url: str, output: Optional[Path], json_output: Optional[Path],
          html_output: Optional[Path], concurrency: Optional[int], timeout: Optional[float],
          no_progress: bool):
    """Обойти sitemap сайта URL и сохранить url,title,description в CSV."""
    if not is_valid_url(url):
        print_error(f'Некорректный URL: {url}')
    try:
        cfg = with_overrides(ctx.obj['config'], concurrency=concurrency, timeout=timeout)
    except ValidationError as e:
        print_error(f'Некорректные параметры: {e}')

    started = time.monotonic()
    progress = _ProgressBar(enabled=not no_progress)
    try:
        report = asyncio.run(start_crawl(cfg, url, on_progress=progress))
    except SitemapError as e:
        print_error(str(e))
    finally:
        progress.finish()

    csv_path = output if output is not None else cfg.output_dir / default_report_name(url)
    try:
        saved_csv = render_csv(report, csv_path)
    except OSError as e:
        print_error(f'Ошибка при сохранении CSV: {e}')
    click.echo(f'CSV report: {saved_csv}')

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, base_url=url)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    click.echo(f'Donezo. {len(report)} pages in {time.monotonic() - started:.2f} s')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
