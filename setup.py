#!/usr/bin/env python
from setuptools import setup, find_packages


def long_desc():
    with open('README.md') as f:
        return f.read()


setup(
    name='dbglog',
    version='1.0',
    description='Pretty print debug values with a file banner and call trail.',
    license='MIT',
    long_description=long_desc(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['test', 'examples']),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    test_suite='test',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Debuggers',
        'Topic :: System :: Logging',
    ]
)
