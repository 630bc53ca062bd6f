# setup.py
from setuptools import setup, find_packages

setup(
    name="vau",
    version="0.1.0",
    description="A minimal Kernel-style (vau-calculus) evaluator with first-class operatives",
    packages=find_packages(include=["vau", "vau.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
