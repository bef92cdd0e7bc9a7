"""Setup configuration for etowah-bid-scraper package."""
from setuptools import setup, find_packages

setup(
    name="etowah-bid-scraper",
    version="1.0.0",
    description="Etowah County 구매 페이지 입찰 목록 스크래퍼 - 입찰번호 도출 및 상세 수집 작업 등록",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "playwright>=1.40.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "python-dotenv>=1.0.0",
        "click>=8.1.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "etowah-bids=etowah_bids.main:main",
        ]
    },
)
