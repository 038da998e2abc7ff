# === FILE: md_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа MdScout для командной строки.

Команды:
  annotate  Найти Markdown-ссылки на сохранённой странице выдачи и добавить кнопки
  classify  Показать, как классифицируются и переписываются отдельные URL
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда annotate опции:
  --page-url URL      URL страницы выдачи (override page_url)
  --append PATH       Фрагмент разметки, догружаемый после первичного сканирования (можно повторять)
  --output PATH       Сохранить размеченный HTML в файл (stdout, если не указан)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)
  --pretty            Преформатировать JSON-отчёт (отступ 2)
  --scan-timeout SEC  Таймаут всего аннотирования (секунд)

Дополнительно:
  --version, -v       Показать версию MdScout

Пример:
  md_scout annotate results.html --page-url "https://www.google.com/search?q=readme" -o annotated.html --json report.json
"""
import asyncio
import json
import sys
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

import click
from pydantic import ValidationError

from md_scout import __version__
from md_scout.config import ScoutConfig, load_config
from md_scout.logger import init_logging
from md_scout.parser.link_resolver import resolve_target_href
from md_scout.parser.url_classifier import is_markdown_url, to_raw_markdown_url
from md_scout.report.html_report import render_html
from md_scout.report.json_report import render_json
from md_scout.scanner import annotate_page

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _origin(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, "", "", ""))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='MdScout, version %(version)s')
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
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд MdScout CLI."""
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


@cli.command('annotate', context_settings=CONTEXT_SETTINGS)
@click.argument('page', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--page-url', 'page_url',
    default=None,
    help='URL страницы выдачи (override page_url)'
)
@click.option(
    '--append', '-a', 'fragments',
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Фрагмент разметки, догружаемый после первичного сканирования'
)
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить размеченный HTML в файл'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-отчёт (отступ 2)'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=float,
    default=None,
    help='Таймаут всего аннотирования (секунд)'
)
@click.pass_context
def annotate(ctx, page, page_url, fragments, output, json_output, html_output, template_dir, pretty, scan_timeout):
    """Добавить кнопки конвертера к результатам со ссылками на Markdown."""
    cfg = ctx.obj['config']
    if page_url:
        try:
            cfg = ScoutConfig(**{**cfg.model_dump(), 'page_url': page_url})
        except ValidationError as e:
            print_error(f'Неверный --page-url: {e}')

    try:
        html = page.read_text(encoding='utf-8')
        chunks = [f.read_text(encoding='utf-8') for f in fragments]
    except OSError as e:
        print_error(f'Ошибка чтения страницы: {e}')

    try:
        if scan_timeout:
            result = asyncio.run(
                asyncio.wait_for(annotate_page(cfg, html, chunks), timeout=scan_timeout)
            )
        else:
            result = asyncio.run(annotate_page(cfg, html, chunks))
    except asyncio.TimeoutError:
        print_error(f'Аннотирование не завершено за {scan_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при аннотировании: {e}')

    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(result.html, encoding='utf-8')
        except OSError as e:
            print_error(f'Ошибка при сохранении HTML: {e}')
        click.echo(f'Annotated HTML: {output} ({len(result.annotations)} buttons)', err=True)
    else:
        click.echo(result.html)

    # JSON-отчёт
    if json_output:
        try:
            saved_json = render_json(result.annotations, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}', err=True)
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    # HTML-отчёт
    if html_output:
        try:
            saved_html = render_html(result.annotations, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}', err=True)
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML-отчёта: {e}')


@cli.command('classify', context_settings=CONTEXT_SETTINGS)
@click.argument('urls', nargs=-1, required=True)
@click.pass_context
def classify(ctx, urls):
    """Показать разбор URL: разрешённая ссылка, Markdown или нет, raw-URL."""
    cfg = ctx.obj['config']
    origin = _origin(cfg.page_url)
    for url in urls:
        resolved = resolve_target_href(url, origin)
        is_md = bool(resolved and resolved.startswith('http') and is_markdown_url(resolved))
        click.echo(json.dumps(
            {
                'url': url,
                'resolved': resolved,
                'is_markdown': is_md,
                'raw_url': to_raw_markdown_url(resolved) if is_md else None,
            },
            ensure_ascii=False,
        ))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
