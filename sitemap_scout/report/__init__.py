"""sitemap_scout.report: Сохранение результатов сканирования (JSON и HTML)."""

from .html_report import render_html
from .json_report import render_json

__all__ = ["render_json", "render_html"]
