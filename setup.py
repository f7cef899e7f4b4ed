from setuptools import setup, find_packages


setup(
    name='disjoint_set',
    version='1.0.0',
    description='A disjoint-set (union-find) structure with union by rank '
                'and path compression, plus graph connectivity helpers.',
    packages=find_packages(include=['disjoint_set', 'disjoint_set.*']),
    python_requires='>=3.8',
    install_requires=[
        'loguru',
        'networkx',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
