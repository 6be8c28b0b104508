from setuptools import find_packages, setup

setup(
    name="relink",
    version="0.1.0",
    description="Link-integrity checker and link-safe file mover for Markdown repositories",
    author="William Wieselquist",
    packages=find_packages(include=["relink", "relink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (>=0.26 vendors its own click)
        "click",  # Typer's parser; usage errors
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # Move plans and YAML output
        "pygments",  # Highlighted JSON/YAML output on a tty
        "jinja2",  # Template rendering for CLI outputs
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
            "relink=relink.cli:main",
        ],
    },
)
