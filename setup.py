#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name='molcajete',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'click>=8.0.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'molcajete=molcajete.main:main',
        ],
    },
    python_requires='>=3.8',
)
