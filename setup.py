from setuptools import find_packages, setup

setup(
    name="brewsvc",
    version="0.1.0",
    description="Service status reporting for Homebrew-style formulae (launchd and systemd)",
    author="William Wieselquist",
    packages=find_packages(include=["brewsvc", "brewsvc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and service declaration validation
        "typer<0.26",  # CLI (0.26+ vendors its own click; brewsvc reads contexts via click)
        "click",  # Context lookup and usage errors
        "rich",  # Terminal formatting
        "jinja2",  # Templated paths in service declarations
        "pyyaml",  # YAML command output
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
            "lizard",  # Cyclomatic complexity
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "brewsvc=brewsvc.cli:main",
        ],
    },
)
