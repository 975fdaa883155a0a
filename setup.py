from setuptools import setup, find_packages

setup(
    name="seasonal-trends-engine",
    version="1.0.0",
    packages=find_packages(include=["seasonal_trends", "seasonal_trends.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.104.1",
        "uvicorn>=0.24.0",
        "numpy>=1.26.2",
        "pandas>=2.1.3",
        "python-dotenv>=1.0.0",
        "redis>=5.0.1",
        "pydantic>=2.5.2",
        "pydantic-settings>=2.1.0",
        "httpx>=0.24.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.4.3",
            "pytest-asyncio>=0.21.1",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.12.0"
        ]
    }
)
