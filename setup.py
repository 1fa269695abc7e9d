#!/usr/bin/env python3
"""
Setup script for wisched package
"""

from setuptools import setup, find_packages

setup(
    name="wisched",
    version="0.1.0",
    description="A lightweight, dependency-free Python library for weighted interval scheduling",
    packages=find_packages(),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
