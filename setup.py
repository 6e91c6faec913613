# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="thelogger",
    version="0.1.0",
    description="Configurable, append-only daily file logger with column-aligned records",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["thelogger*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'thelogger=thelogger.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
