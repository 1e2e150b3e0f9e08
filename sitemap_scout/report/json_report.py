# sitemap_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта SitemapScout.

Сериализация списка SeoRecord в файл.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from sitemap_scout.crawler.models import SeoRecord


def render_json(records: Iterable[SeoRecord], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет записи в виде JSON-массива по указанному пути.

    :param records: SeoRecord, полученные при сканировании
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела (по умолчанию) или компактная запись
    :return: Path сохранённого файла

    Пример:
    ```python
    from sitemap_scout.report.json_report import render_json
    report_path = render_json(report.records, 'output.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [record.to_dict() for record in records]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
