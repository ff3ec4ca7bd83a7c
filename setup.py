# setup.py
from setuptools import setup, find_packages

setup(
    name="daybook",
    version="0.1.0",
    description="A small CLI ledger for recording income and expense entries",
    packages=find_packages(include=["entry_tracker", "entry_tracker.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.19",
        "anyio>=3.0",
        "xlsxwriter>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "openpyxl>=3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "daybook=entry_tracker.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
