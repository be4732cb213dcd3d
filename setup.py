"""
Setup script for chain-resolver package.
"""

from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="chain-resolver",
    version="1.0.0",
    author="Chain Resolver Contributors",
    description="Dependency-first install ordering for single-dependency package chains",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["chain_resolver", "chain_resolver.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Software Distribution",
    ],
    python_requires=">=3.10",
    install_requires=[
        "networkx>=3.0",
        "pydot>=1.4.2",  # DOT export through networkx
        "tabulate>=0.9.0",
        "colorama>=0.4.6",  # Colored output
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "mypy",
            "black",
            "ruff",
        ],
    },
    entry_points={
        "console_scripts": [
            "chain-resolver=chain_resolver.cli:main",
        ],
    },
)
