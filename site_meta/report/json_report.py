# site_meta/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteMeta.

Сериализация ReportSet в файл: список объектов {url, title, description}.
"""
import json
from pathlib import Path

from site_meta.models import ReportSet


def render_json(report: ReportSet, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект ReportSet
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.as_dicts(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
