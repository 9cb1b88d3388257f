"""Setup script for biiif-csv."""

from setuptools import setup, find_packages
import os

# Read version from version.py
version = {}
with open(os.path.join("biiif_csv", "core", "version.py")) as f:
    exec(f.read(), version)

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

# Read README
with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="biiif-csv",
    version=version["__version__"],
    author="biiif-csv contributors",
    description="Build biiif collection/manifest/canvas directory trees from a CSV file",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Information Technology",
        "Topic :: Multimedia",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "biiif-csv=biiif_csv.__main__:main",
        ],
    },
    include_package_data=True,
)
