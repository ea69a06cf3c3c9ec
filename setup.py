# setup.py
from setuptools import setup, find_packages

setup(
    name="cinder",
    version="0.1.0",
    description="A minimal interactive evaluator for a small Lisp",
    packages=find_packages(include=["cinder", "cinder.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["cinder = cinder.cli:main"],
    },
    zip_safe=False,
)
