#!/usr/bin/env python
import setuptools
from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("./cigarkit/VERSION", "r") as vf:
    version = vf.read().strip()

setup(
    name="cigarkit",
    version=version,

    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.23.4",
        "orjson>=3.9.15,<4",
        "parasail>=1.2.4,<1.4",
        "pysam>=0.19",
    ],
    extras_require={
        "test": ["pytest"],
    },

    description="A toolkit for parsing, building and combining CIGAR alignment strings.",
    long_description=long_description,
    long_description_content_type="text/markdown",

    license="GPLv3",
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX",
    ],

    packages=setuptools.find_packages(include=["cigarkit", "cigarkit.*"]),
    package_data={"cigarkit": ["VERSION"]},
    include_package_data=True,

    entry_points={
        "console_scripts": ["cigarkit=cigarkit.entry:main"],
    },
)
