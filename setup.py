#!/usr/bin/env python3
"""
property-information setup
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="property-information",
    version="5.6.0",
    description="Metadata about HTML, SVG and ARIA attributes and properties",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "property_information.schema": ["data/*.json"],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "property-information=property_information.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "beautifulsoup4>=4.9",
            "lxml>=4.6",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="html, svg, aria, attributes, properties, dom",
)
