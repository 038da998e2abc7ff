# setup.py
from setuptools import setup, find_packages

setup(
    name="md_scout",
    version="0.1.0",
    description="Асинхронный поиск Markdown-ссылок в выдаче и добавление кнопок конвертера",
    packages=find_packages(include=["md_scout", "md_scout.*"]),
    package_data={"md_scout": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "Jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "md_scout=md_scout.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
