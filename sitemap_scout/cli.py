# === FILE: sitemap_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SitemapScout через командную строку.

Команды:
  scan [BASE_URL]   Найти sitemap сайта, собрать SEO-данные и сохранить JSON
  config            Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда scan опции:
  --output PATH       Файл JSON-результатов (default: output.json)
  --html PATH         Дополнительно сохранить HTML-отчёт
  --template DIR      Папка с Jinja2-шаблонами (default: встроенный шаблон)
  --batch-size INT    Число одновременных запросов
  --timeout SEC       Таймаут одного запроса
  --pretty/--compact  Формат JSON (по умолчанию с отступом 2)

Дополнительно:
  --version, -v       Показать версию SitemapScout

Пример:
  sitemap-scout scan https://example.com --output reports/seo.json --batch-size 20
"""
import json
import sys
from pathlib import Path

import click

from sitemap_scout import __version__
from sitemap_scout.config import load_config
from sitemap_scout.engine import start_scan
from sitemap_scout.logger import DEFAULT_FORMAT, init_logging
from sitemap_scout.report.html_report import render_html
from sitemap_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SitemapScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
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
    """Группа команд SitemapScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.argument('base_url', required=False)
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл для JSON-результатов (по умолчанию из конфига: output.json)'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами'
)
@click.option('--batch-size', '-b', 'batch_size', type=int, default=None,
              help='Число одновременных запросов в пакете')
@click.option('--timeout', 'timeout', type=float, default=None,
              help='Таймаут одного запроса (секунд)')
@click.option('--pretty/--compact', default=True, show_default=True,
              help='Формат JSON-вывода')
@click.pass_context
def scan(ctx, base_url, output, html_output, template_dir, batch_size, timeout, pretty):
    """Найти sitemap сайта BASE_URL, собрать SEO-данные и сохранить их."""
    try:
        cfg = ctx.obj['config'].with_overrides(
            base_url=base_url, output=output, batch_size=batch_size, timeout=timeout
        )
    except Exception as e:
        print_error(f'Неверные параметры: {e}')

    click.echo(f'Scanning {cfg.base_url}')
    try:
        report = start_scan(cfg)
    except Exception as e:
        print_error(f'Ошибка при сканировании: {e}')

    if not report.found_sitemaps:
        click.echo('No sitemaps found.')
        return

    try:
        saved_json = render_json(report.records, cfg.output, pretty=pretty)
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report.records, template_dir, html_output, base_url=report.base_url)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    click.echo(f'Done. {len(report.records)} page(s). Results written to {saved_json}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(json.dumps(cfg.model_dump(mode='json'), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
