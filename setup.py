import os

from setuptools import find_packages, setup

setup(
    name="schemawalk",
    version="0.1.0",
    packages=find_packages(include=["schemawalk", "schemawalk.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    author="schemawalk Contributors",
    description="Runtime structural validation driven by a small recursive schema grammar",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
