"""
Setup script for kugiri package.

Kugiri is a Python library that splits Japanese text into words with a
compact, dictionary-free statistical model.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="kugiri",
    version="0.1.0",
    author="Noyu Ritsuji",
    author_email="",
    description="Compact dictionary-free word segmentation for Japanese",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/noyuri2z/kugiri",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "kugiri": ["data/*.tsv"],
    },
    entry_points={
        "console_scripts": [
            "kugiri=kugiri.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Linguistic",
        "Natural Language :: Japanese",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    keywords=[
        "japanese",
        "segmentation",
        "tokenizer",
        "wakachigaki",
        "nlp",
    ],
)
