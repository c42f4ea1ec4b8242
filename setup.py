#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()


setup(
    name='influxline',
    version='0.1.0',
    description="Line-protocol encoder and HTTP write/query client for InfluxDB 1.x.",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="influxline developers",
    packages=[
        'influxline',
        'influxline.config',
    ],
    package_dir={'influxline': 'influxline'},
    include_package_data=True,
    install_requires=[
        'httpx>=0.23',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.9",
    license="MIT license",
    zip_safe=False,
    keywords='influxdb line-protocol time-series',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
