#!/usr/bin/env python

"""
relkit - Sets, Relations and Mappings
=====================================

**relkit is a small library of mutable Set, Relation and Mapping
collections** with exact contracts, including a checked functional
invariant for Mapping.
"""

import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))


def get_file_text(file_name: str) -> str:
    with open(os.path.join(here, file_name)) as in_file:
        return in_file.read()


setup(
    name="relkit",
    version="1.0.0",
    description="Set, Relation and Mapping collections with checked contracts.",
    long_description=get_file_text("README.rst"),
    long_description_content_type="text/x-rst",
    packages=find_packages(exclude=("tests", "tests.*")),
    # PEP 561
    package_data={"relkit": ["py.typed"]},
    zip_safe=False,
    license="MIT",
    python_requires=">=3.9",
    install_requires=["parsimonious>=0.10.0"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
