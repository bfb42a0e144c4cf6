# File: site_meta/report/__init__.py
"""site_meta.report: Экспорт ReportSet в CSV, JSON и HTML для CLI и тестов."""

from .csv_report import render_csv
from .html_report import render_html
from .json_report import render_json

__all__ = ["render_csv", "render_json", "render_html"]
