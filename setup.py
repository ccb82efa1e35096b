#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""
import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'README.rst')) as readme_file:
    readme = readme_file.read()

with open(os.path.join(here, 'HISTORY.rst')) as history_file:
    history = history_file.read()

requires = []
with open(os.path.join(here, 'requirements.txt')) as requirements_file:
    for line in requirements_file:
        line = line.split('#')[0].strip()
        if line:
            requires.append(line)

test_requirements = ['pytest', ]

setup(
    author="genedecoder developers",
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    description="Translate genes from FASTA records into one- and three-letter protein sequences.",
    entry_points={
        'console_scripts': [
            'genedecoder=genedecoder.cli:main',
        ],
    },
    install_requires=requires,
    extras_require={'test': test_requirements},
    license="MIT license",
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='genedecoder',
    name='genedecoder',
    packages=find_packages(include=['genedecoder', 'genedecoder.translation', 'genedecoder.utils']),
    python_requires='>=3.6',
    version='0.1.0',
    zip_safe=False,
)
