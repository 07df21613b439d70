# setup.py
from setuptools import setup, find_packages

setup(
    name="tinylisp",
    version="0.1.0",
    description="A minimal Lisp evaluator with composable dialects",
    packages=find_packages(include=["tinylisp", "tinylisp.*"]),
    python_requires=">=3.10",  # structural pattern matching in the evaluator
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis>=6.84"],
    },
    zip_safe=False,
)
