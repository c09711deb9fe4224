#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()
with open('HISTORY.rst', encoding='utf8') as history_file:
    history = history_file.read()
with open('osversion/VERSION', encoding='utf8') as version_file:
    version = version_file.read().strip()


setup(
    name='osversion',
    version=version,
    description="Detects the operating system and edition of the running host.",
    long_description=readme + '\n\n' + history,
    long_description_content_type="text/markdown",
    author="osversion developers",
    packages=[
        'osversion',
        'osversion.utils',
        'osversion.utils.android',
        'osversion.utils.linux',
        'osversion.utils.macos',
        'osversion.utils.openbsd',
        'osversion.utils.windows',
    ],
    package_dir={'osversion': 'osversion'},
    package_data={'osversion': ['VERSION']},
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.8",
    license="MIT license",
    zip_safe=False,
    keywords='osversion os-release windows edition',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: MacOS',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX :: Linux',
        'Operating System :: POSIX :: BSD :: OpenBSD',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
