#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# setup.py
from setuptools import setup, find_packages

# 读取README
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="replference",
    version="0.1.0",
    description="Topic documentation and function listings for Julia newcomers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click",
        "rich",
        "prompt_toolkit",
    ],
    extras_require={
        'test': [
            "pytest",
        ],
    },
    entry_points={ # 入口
        'console_scripts': [
            'replference=replference.cli:main',
        ],
    },
    python_requires='>=3.8',
    package_data={
        'replference': [
            'resources/*.txt',
            'resources/docs/*.md',
            'resources/operations/*.json',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
