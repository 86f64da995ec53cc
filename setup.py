#!/usr/bin/env python3
"""
Setup script for the Door & Window Product Configurator.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="product-configurator",
    version="1.0.0",
    author="Fabrica do Aluminio",
    description="Guided configurator that narrows a door and window catalog to a single product",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "product_configurator": ["data/catalog/*.csv"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "configurator-cli=product_configurator.cli.configurator_cli:main",
        ],
    },
)
