from setuptools import setup, find_packages

setup(
    name="launchready",
    version="0.1.0",
    description="Maps AI products to jurisdiction-specific regulatory requirements and builds launch action plans",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    py_modules=["cli", "pipeline_runner"],
    package_data={"config": ["pipeline_config.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "structlog>=23.0",
        "python-dotenv>=1.0",
        "anthropic>=0.32",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "launchready=cli:main",
        ],
    },
)
