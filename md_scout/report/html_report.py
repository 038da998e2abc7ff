# File: md_scout/report/html_report.py
"""md_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from jinja2 import Environment, FileSystemLoader, PackageLoader, select_autoescape

from md_scout.injector.models import Annotation

TEMPLATE_NAME = "report.html.j2"


def render_html(
    annotations: Iterable[Annotation],
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        annotations: добавленные кнопки.
        template_dir: директория с Jinja2-шаблонами; None — встроенный шаблон пакета.
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    loader = (
        FileSystemLoader(str(template_dir))
        if template_dir is not None
        else PackageLoader("md_scout", "templates")
    )
    env = Environment(loader=loader, autoescape=select_autoescape(["html", "xml", "j2"]))
    template = env.get_template(TEMPLATE_NAME)

    items = list(annotations)
    context: dict[str, Any] = {"annotations": items, "count": len(items)}

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
