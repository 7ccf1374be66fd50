"""Setup configuration for stock_data_manager."""

from setuptools import setup, find_packages

setup(
    name="stock_data_manager",
    version="0.1.0",
    description="Daily price ingestion and moving-average indicators backed by MongoDB",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.7.0",
        "requests>=2.28.0",
        "pymongo>=4.0.0",
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "stock-data-manager=stock_data_manager.__main__:main",
        ],
    },
)
