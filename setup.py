from setuptools import find_packages, setup

setup(
    name="opencmd",
    version="0.1.0",
    description="Generate commands for opening paths and URIs in the default system handler",
    packages=find_packages(include=["opencmd", "opencmd.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "opencmd=opencmd.cli:main",
        ],
    },
)
