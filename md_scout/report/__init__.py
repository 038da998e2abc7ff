# File: md_scout/report/__init__.py
"""md_scout.report: генерация отчётов (JSON и HTML) о найденных Markdown-ссылках."""

from md_scout.report.html_report import render_html
from md_scout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
