"""
Setup script for deus package.

Installation:
    pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name="deus",
    version="0.1.0",
    description="Particle data model: symbols and creation times",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": ["pytest>=7.3", "black>=23.0", "mypy>=1.3", "ipython>=8.12"],
    },
)
