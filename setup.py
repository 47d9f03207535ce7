from setuptools import find_packages, setup

setup(
    name="logkeep",
    version="0.1.0",
    description="Categorized CSV logging with rotation, retention and scheduled backup",
    packages=find_packages(include=["logkeep", "logkeep.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code uses click contexts)
        "click",  # Imported directly by the CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "logkeep=logkeep.cli:main",
        ],
    },
)
