"""
Setup script for docview.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

# Read requirements
requirements = [
    line.strip()
    for line in (this_directory / "requirements.txt").read_text(encoding='utf-8').splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="docview",
    version="1.0.0",
    description="Uniform rotate, flip, crop and render core for raster images, SVG and PDF documents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="docview contributors",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "docview=docview.cli:cli",
        ],
    },
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Graphics :: Viewers",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf svg image viewer rotate flip crop zoom pan",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
