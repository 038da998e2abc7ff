# === FILE: md_scout/scanner.py ===
"""
Фасад для запуска аннотирования: страница, движок, наблюдатель и HEAD-проба в одном вызове.
"""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from md_scout.annotator import Annotator
from md_scout.config import ScoutConfig
from md_scout.injector.models import Annotation
from md_scout.injector.probe import HeadProbe, MarkdownProbe
from md_scout.injector.scan import ScanEngine
from md_scout.injector.watcher import MutationWatcher
from md_scout.logger import logger
from md_scout.parser.result_page import ResultPage


@dataclass(slots=True)
class ScanResult:
    """Итог аннотирования: итоговый HTML и список добавленных кнопок."""

    html: str
    annotations: List[Annotation] = field(default_factory=list)


async def _run(
    cfg: ScoutConfig,
    page: ResultPage,
    probe: MarkdownProbe,
    fragments: Iterable[str],
) -> ScanResult:
    engine = ScanEngine(page, probe, Annotator(page, cfg), cfg)
    watcher = MutationWatcher(page, engine)
    watcher.observe()
    try:
        engine.inject_buttons()
        for fragment in fragments:
            # даём уже запущенным пробам шанс продвинуться между порциями
            await asyncio.sleep(0)
            page.append_html(fragment)
        await engine.drain()
    finally:
        watcher.disconnect()
        engine.close()
    return ScanResult(html=page.render(), annotations=list(engine.annotations))


async def annotate_page(
    cfg: ScoutConfig,
    html: str,
    fragments: Iterable[str] = (),
    probe: Optional[MarkdownProbe] = None,
) -> ScanResult:
    """
    Аннотирует страницу выдачи и дожидается завершения всех проб.

    Parameters
    ----------
    cfg : ScoutConfig
        Конфигурация (page_url, селекторы, конвертер).
    html : str
        Исходная разметка страницы.
    fragments : Iterable[str]
        Порции разметки, догружаемые в <body> после первичного сканирования.
    probe : MarkdownProbe, optional
        Готовая проба; по умолчанию создаётся HeadProbe с собственной сессией.

    Returns
    -------
    ScanResult
    """
    logger.info("Annotating %s", cfg.page_url)
    start = time.monotonic()
    page = ResultPage(html, cfg.page_url)

    if probe is None:
        async with HeadProbe(cfg) as head:
            result = await _run(cfg, page, head, fragments)
    else:
        result = await _run(cfg, page, probe, fragments)

    logger.info(
        "Завершено: %d кнопок за %.2f с", len(result.annotations), time.monotonic() - start
    )
    return result


__all__ = ["ScanResult", "annotate_page"]
