#!/usr/bin/env python3

import os
from setuptools import setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="kcommon",
    version="0.1.0",
    license="MIT",
    description="Longest substrings shared by at least k strings, with generalized suffix arrays",
    long_description=read("README.rst"),
    packages=["kcommon"],
    install_requires=["click", "tqdm"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.6",
    entry_points={"console_scripts": ["kcommon = kcommon:main"]},
    classifiers=[
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: Text Processing",
        "Topic :: Utilities",
    ],
)
