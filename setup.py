# setup.py
from setuptools import setup, find_packages

setup(
    name="site_meta",
    version="0.1.0",
    description="SiteMeta: title и description всех страниц из sitemap.xml в CSV",
    packages=find_packages(include=["site_meta", "site_meta.*"]),
    package_data={"site_meta": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["site-meta=site_meta.cli:cli"],
    },
    python_requires=">=3.11",
)
