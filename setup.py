#!/usr/bin/env python

from setuptools import setup

lamcps_version = '0.0.1'

setup(name='lamcps',
      version=lamcps_version,
      description='a one-pass CPS transformation for the lambda calculus',
      author='The lamcps developers',
      packages=[
        'lamcps'
      ],
      package_dir={
        'lamcps': 'lamcps',
      },
      python_requires='>=3.7',
      install_requires=[
        'colorama>=0.4.6'
      ],
      extras_require={
        'test': ['pytest']
      }
     )
