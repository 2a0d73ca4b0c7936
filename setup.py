#!/usr/bin/env python3
# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0

"""Setup script for stdlib-functions."""

from setuptools import setup, find_packages

setup(
    name="stdlib-functions",
    version="0.1.0",
    description="Configuration language helper functions (bool2str)",
    author="Aria Akhavan",
    license="Apache-2.0",
    packages=find_packages(include=["stdlib_functions", "stdlib_functions.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
