#!/usr/bin/env python
import codecs
import os.path
import re

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    return codecs.open(os.path.join(here, *parts), "r", encoding="utf-8").read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


requires = []

setup(
    name="smithy-auth-codegen",
    version=find_version("smithy_auth_codegen", "__init__.py"),
    description="Generates auth scheme providers from Smithy auth traits",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    author="Amazon Web Services",
    keywords="python sdk amazon smithy codegen auth",
    url="https://github.com/awslabs/smithy-python",
    scripts=[],
    packages=find_packages(exclude=["tests*", "designs"]),
    include_package_data=True,
    install_requires=requires,
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "smithy-auth-codegen=smithy_auth_codegen.__main__:main",
        ],
    },
    python_requires=">=3.12",
    project_urls={
        "Source": "https://github.com/awslabs/smithy-python",
    },
    license="Apache License 2.0",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Code Generators",
    ],
)
