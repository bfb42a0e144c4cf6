# site_meta/report/csv_report.py

"""
Генерация CSV-отчёта SiteMeta: заголовок url,title,description и по строке на запись sitemap.
"""
import csv
from pathlib import Path

from site_meta.models import ReportSet


def render_csv(report: ReportSet, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в CSV по указанному пути.

    :param report: объект ReportSet с результатами обхода
    :param output_path: путь к CSV-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from site_meta.report.csv_report import render_csv
    csv_path = render_csv(report, 'reports/example.csv')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(ReportSet.HEADER)
        writer.writerows(row.as_tuple() for row in report)

    return output
