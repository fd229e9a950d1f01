# setup.py
"""Package settings for tz-log-formatter.

This script uses `setuptools` to define packaging, dependencies
and entry points for the project.
"""
import os
from setuptools import setup, find_packages

# Read the version from tz_log_formatter/config.py
def get_version():
    version_filepath = os.path.join(os.path.dirname(__file__), 'tz_log_formatter', 'config.py')
    with open(version_filepath) as f:
        for line in f:
            if line.startswith('VERSION'):
                return line.strip().split()[-1].strip('"')
    raise RuntimeError("Version string not found.")

# Use README.md as long_description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setup(
    name="tz-log-formatter",
    version=get_version(),
    description="Logging formatter that renders timestamps in a configurable UTC offset and precision",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tz-log-demo=tz_log_formatter.main:main",
        ],
    },
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
