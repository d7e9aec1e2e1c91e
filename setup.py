# setup.py
from setuptools import setup, find_packages

setup(
    name="nano-lang",
    version="0.1.0",
    description="Tree-walking evaluator for the Nano expression language",
    packages=find_packages(include=["nano", "nano.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["nano=nano.__main__:main"],
    },
    zip_safe=False,
)
