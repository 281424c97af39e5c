from __future__ import annotations

from setuptools import find_namespace_packages
from setuptools import setup

setup(
    name="cf-drain-cli",
    version="0.1.0",
    packages=find_namespace_packages(include=["cfdrain", "cfdrain.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["pyyaml", "sentry-sdk>=2,<3"],
    extras_require={
        "dev": ["black", "mypy", "pre-commit", "pytest", "types-PyYAML"],
    },
    entry_points={
        "console_scripts": [
            "cf-drain=cfdrain.main:main",
        ],
    },
)
