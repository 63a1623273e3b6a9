"""
Setup script for the Content Catalog package.

This package provides cache-fronted content management for the media
catalog: a DynamoDB content store, an in-process sliding-expiration cache
and genre mutation rules.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="content-catalog",
    version="1.0.0",
    author="Content Catalog Team",
    description="Cache-fronted content management for a media catalog",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Database :: Front-Ends",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        # AWS SDK
        "boto3>=1.28.85",
        "botocore>=1.31.85",
    ],
    extras_require={
        "dev": [
            # Testing
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0",
            "moto[dynamodb]>=5.0.0",

            # Code quality
            "black>=23.11.0",
            "flake8>=6.1.0",
            "mypy>=1.7.1",

            # Type stubs
            "boto3-stubs[dynamodb]>=1.28.85",
        ],
    },
    zip_safe=False,
)
