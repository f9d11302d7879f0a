from setuptools import setup, find_packages
from writemode import __version__

setup(
    name="writemode",
    version=__version__,
    description="Symbolic write modes mapped to file open flags",
    license="GPL-3.0-or-later",
    packages=find_packages(include=['writemode', 'writemode.*']),
    python_requires='>=3.7',
    install_requires=[
        'click>=8.0',
        'PyYAML',
        'jsonschema',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
