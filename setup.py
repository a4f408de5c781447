"""
wktparse
========

Well-known text geometry parser with EWKT and SFS 1.2 support.
"""

from setuptools import find_packages, setup


setup(
    name='wktparse',
    version='1.0.0',
    description='Well-known text geometry parser',
    long_description=__doc__,
    license='Apache 2.0',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'attrs',
        'click',
        'geomet',
    ],
    python_requires='>=3.7.1',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wktparse = wktparse.cli:main',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Environment :: Console',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: GIS',
    ]
)
