# File: site_meta/utils.py
"""site_meta.utils: Утилиты для работы с базовым URL и именами файлов отчётов."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence
from urllib.parse import urlparse

from site_meta.logger import logger

__all__: Sequence[str] = (
    "is_valid_url",
    "extract_domain",
    "join_base",
    "default_report_name",
)


def is_valid_url(url: str) -> bool:
    """Проверяет, что URL абсолютный и использует http(s)."""
    parsed = urlparse(url)
    valid = parsed.scheme in ("http", "https") and bool(parsed.netloc)
    logger.debug("URL valid: %s -> %s", url, valid)
    return valid


def extract_domain(url: str) -> str:
    """Возвращает хост из URL без порта и дополнительных проверок."""
    return urlparse(url).hostname or ""


def join_base(base_url: str, path: str) -> str:
    """Приклеивает путь к базовому URL без двойного слеша: ``https://a.b/`` + ``/x``."""
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def default_report_name(base_url: str, now: Optional[datetime] = None, suffix: str = ".csv") -> str:
    """Имя отчёта вида ``website_meta_<host>_<YYYY-mm-dd_HH-MM-SS>.csv``."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
    return f"website_meta_{extract_domain(base_url)}_{stamp}{suffix}"
