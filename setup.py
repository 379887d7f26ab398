from setuptools import setup, find_packages

setup(
    name="xfa-json",
    version="0.1.0",
    description="Convert XFA form data islands to clean, structured JSON",
    author="Your Name",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "pyyaml>=6.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "xfa-json=xfa_json.cli:app"
        ]
    },
    python_requires=">=3.10",
    include_package_data=True,
)
