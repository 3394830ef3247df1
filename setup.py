#!/usr/bin/env python
import os
import re

from setuptools import setup

current_dir = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(current_dir, "fixrat", "__init__.py")) as f:
    __version__ = re.search(
        r'^__version__ = "(.*)"', f.read(), re.MULTILINE).group(1)

setup(
    name="fixrat",
    version=__version__,
    description="Exact rational numbers over fixed width integers",
    author="Dean Shaff",
    author_email="dean.shaff@gmail.com",
    packages=["fixrat"],
    python_requires=">=3.7",
    install_requires=[
        "numpy",
        "numba"
    ],
    extras_require={
        "test": ["pytest"]
    }
)
