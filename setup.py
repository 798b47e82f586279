# setup.py
from setuptools import setup, find_packages

setup(
    name="glisp",
    version="0.1.0",
    description="Structural printer and SVG path compiler for glisp expression trees",
    packages=find_packages(include=["glisp", "glisp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
