#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='marlin-post',
    version='0.1',
    description='G-code post processor for Marlin CNC routers, lasers and plasma cutters',
    author='Matti Eiden',
    author_email='snaipperi@gmail.com',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['*.tests']),
    python_requires='>=3.10',
    install_requires=['cadquery', 'numpy'],
    extras_require={'test': ['pytest']},
)
