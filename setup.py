#!/usr/bin/env python

from setuptools import setup

VERSION = "1.0.0"

COMMANDS = ['httpfscat',
            'httpfsinfo']


CONSOLE_SCRIPTS = ['{0} = httpfs.commands.{0}:run'.format(command)
                   for command in COMMANDS]

classifiers = [
    "Development Status :: 5 - Production/Stable",
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Internet :: WWW/HTTP',
    'Topic :: System :: Filesystems',
]

with open('README.txt', 'r') as f:
    long_desc = f.read()


setup(install_requires=[],
      extras_require={'test': ['pytest']},
      name='httpfs',
      version=VERSION,
      description="Read-only filesystem abstraction over HTTP",
      long_description=long_desc,
      license="BSD",
      python_requires=">=3.7",
      platforms=['any'],
      packages=['httpfs',
                'httpfs.commands',
                'httpfs.tests'],
      entry_points={"console_scripts": CONSOLE_SCRIPTS},
      classifiers=classifiers,
      )
