"""site_meta.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import BaseLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from site_meta.models import ReportSet

TEMPLATE_NAME = "report.html.j2"


def render_html(
    report: ReportSet,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
    *,
    base_url: str = "",
) -> Path:
    """Рендерит HTML-таблицу отчёта и сохраняет её по указанному пути.

    Args:
        report: объект ReportSet.
        output_path: путь к итоговому HTML-файлу.
        template_dir: каталог со своим ``report.html.j2``; по умолчанию
            берётся шаблон из пакета ``site_meta/templates``.
        base_url: адрес сайта для заголовка страницы.

    Returns:
        Path до сохранённого HTML-файла.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    loader: BaseLoader
    if template_dir is None:
        loader = PackageLoader("site_meta", "templates")
    else:
        loader = FileSystemLoader(str(template_dir))

    env = Environment(loader=loader, autoescape=select_autoescape(["html", "xml", "j2"]))
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "base_url": base_url,
        "header": ReportSet.HEADER,
        "rows": list(report),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
