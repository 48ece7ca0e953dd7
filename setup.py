"""Setup script for Algebra Toolkit."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="algebra-toolkit",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Generic algebraic operations and polynomials over arbitrary rings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/algebra-toolkit",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "algebra-demo=algebra_toolkit.main:main",
            "algebra-operations=algebra_toolkit.operations.demo:main",
            "algebra-polynomials=algebra_toolkit.functions.demo:main",
        ],
    },
)
