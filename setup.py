#!/usr/bin/env python3

"""Setup script for the skeleton to OpenDX conversion package."""

from setuptools import setup, find_packages

setup(
    name="skl2dx",
    version="0.1.0",
    description="Convert OLCAO skeleton structure files into OpenDX geometry documents",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "rdkit>=2022.3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "make-dx=skl2dx.presentation.cli.make_dx:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Topic :: Scientific/Engineering :: Visualization",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
