"""
Setup script for the datacv project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="datacv",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["version"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "pymongo>=4.6",
        "python-dotenv>=1.0",
        "python-json-logger>=3.1",
        "typing-extensions>=4.8",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
)
