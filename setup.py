# -*- coding: utf-8 -*-
"""Setup for bandito."""
import os

from setuptools import setup, find_packages

from bandito import __version__


here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md')) as readme_file:
    README = readme_file.read()


VERSION = __version__


CLASSIFIERS = """
        Development Status :: 4 - Beta
        Intended Audience :: Developers
        Programming Language :: Python
        Programming Language :: Python :: 3
        Topic :: Software Development
        Topic :: Scientific/Engineering
        Operating System :: Unix
        Operating System :: MacOS

        """


requires = [
    'numpy>=1.17',
    'scipy>=1.2',
    'colander',
    'simplejson',
    ]

test_requires = [
    'pytest',
    ]


setup(name='bandito',
      version=VERSION,
      description='Multi-armed bandit variant selection for A/B experiments',
      long_description=README,
      long_description_content_type='text/markdown',
      classifiers=[_f for _f in CLASSIFIERS.split('\n') if _f],
      keywords='multi-armed bandit epsilon-greedy softmax ab testing experiment',
      packages=find_packages(),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.6',
      install_requires=requires,
      extras_require={
          'testing': test_requires,
          },
      )
