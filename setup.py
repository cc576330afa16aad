from setuptools import find_packages, setup

setup(
    name="linker",
    version="0.3.0",
    description="Linker - rule-based and inline link discovery for source text",
    packages=find_packages(include=["linker", "linker.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Settings and rule validation
        "typer<0.26",  # CLI (0.26+ vendors click; the CLI reads contexts via click)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "watchdog",  # Rule file auto reload
        "click",  # CLI context and usage errors
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linker=linker.cli:main",
        ],
    },
)
