#!/usr/bin/env python

"""Setup file"""

# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

with open('README.md', encoding="utf-8") as readme_file:
    readme = readme_file.read()

requirements = [
    'tiktoken>=0.7.0',
    'Click>=8.1.7',
    'python-dotenv>=1.0.0',
    'tenacity>=8.2.3',
]

test_requirements = [
    'pytest>=7.4',
]

setup(
    name='token_estimator',
    version='0.1.0',
    description="LLM token count estimation with a character-count fallback",
    long_description=readme,
    long_description_content_type='text/markdown',
    author="Maxim Moroz",
    author_email='mimoroz@edu.hse.ru',
    packages=find_packages(where='src', include=['token_estimator', 'token_estimator.*']),
    package_dir={'': 'src'},
    entry_points={
        'console_scripts': [
            'token_estimator=token_estimator:cli'
        ]
    },
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.9',
    zip_safe=False,
    keywords='token_estimator tiktoken',
    classifiers=[
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ]
)
