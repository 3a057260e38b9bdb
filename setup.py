#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from os import path

from setuptools import find_packages, setup

here = path.abspath(path.dirname(__file__))

# read __version__ without importing the package, its dependencies might not be installed yet
with open(path.join(here, 'csv_extra', 'version.py')) as fp:
    exec(fp.read())

setup(
    name='csv-extra',
    version=__version__,  # type: ignore[name-defined]  # noqa: F821
    description='Field codecs for lists, matrices and optional pairs of numbers in CSV cells',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.11',
    install_requires=[
        'pydantic>=2',
        'PyYAML',
        'structlog',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
