# File: sitemap_scout/report/html_report.py
"""sitemap_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from sitemap_scout.crawler.models import SeoRecord

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    records: Iterable[SeoRecord],
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
    *,
    base_url: str = "",
) -> Path:
    """Рендерит HTML-таблицу SEO-записей и сохраняет её по указанному пути.

    Args:
        records: записи SeoRecord.
        template_dir: директория с Jinja2-шаблонами (None: встроенный шаблон).
        output_path: путь к итоговому HTML-файлу.
        base_url: сайт, для которого построен отчёт (заголовок страницы).

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    rows = [record.to_dict() for record in records]
    context: dict[str, Any] = {
        "base_url": base_url,
        "records": rows,
        "total": len(rows),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
