#!/usr/bin/env python

import os.path
import re
import sys

from setuptools import setup

if sys.argv[-1] == 'publish':
    os.system("python setup.py sdist bdist_wheel")
    os.system('twine upload dist/* -r pypi')
    sys.exit()


def read(filename):
    with open(os.path.join(os.path.dirname(__file__), filename)) as f:
        return f.read()


description = 'Google Spreadsheets feed API client'

long_description = """
Read and edit the rows and cells of a Google spreadsheet through the
spreadsheets feed API, anonymously, with a raw token or with a service account.

License
-------
MIT
"""

version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                    read('pygfeeds/__init__.py'), re.MULTILINE).group(1)

install_require = ['httplib2>=0.15.0', 'google-auth>=1.6.0', 'google-auth-httplib2>=0.0.3',
                   'google-auth-oauthlib>=0.4.0']

setup(
    name='pygfeeds',
    packages=['pygfeeds'],
    description=description,
    long_description=long_description,
    version=version,
    author='Nithin Murali',
    author_email='imnmfotmal@gmail.com',
    keywords=['spreadsheets', 'google-spreadsheets', 'feeds', 'pygfeeds'],
    install_requires=install_require,
    extras_require={'test': ['pytest>=6.0']},
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Office/Business :: Financial :: Spreadsheet",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    license='MIT'
    )
