"""Setup configuration for the playwright-e2e-suite package."""

from setuptools import setup, find_packages

setup(
    name="playwright-e2e-suite",
    version="0.1.0",
    description="End-to-end browser tests and helpers built on Playwright",
    packages=find_packages(include=["src", "src.*"], exclude=["src.tests*"]),
    python_requires=">=3.9",
    install_requires=[
        "playwright>=1.40.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.24.0",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.11.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "black>=23.0.0",
        ],
    },
)
