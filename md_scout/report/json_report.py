# md_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта MdScout.

Сериализация списка Annotation в файл.
"""
import json
from pathlib import Path
from typing import Iterable

from md_scout.injector.models import Annotation


def annotations_payload(annotations: Iterable[Annotation]) -> dict:
    """Словарь, который пишется в JSON-отчёт и печатается CLI."""
    items = [a.to_dict() for a in annotations]
    return {"count": len(items), "annotations": items}


def render_json(annotations: Iterable[Annotation], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт в формате JSON по указанному пути.

    :param annotations: добавленные кнопки
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from md_scout.report.json_report import render_json
    report_path = render_json(result.annotations, 'reports/annotations.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(annotations_payload(annotations), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
