# -*- coding: utf-8 -*-
import sys

from setuptools import setup, find_packages

# Avoids IDE errors, but actual version is read from version.py
__version__ = ""
exec(open('cmdquote/version.py').read())

if sys.version_info < (3,):
    sys.exit('Sorry, Python3 is required.')

with open('README.md', 'r', encoding='utf-8') as f:
    readme = f.read()

setup(
    name='cmdquote',
    version=__version__,
    description='cmdquote: parse and quote command lines with POSIX shell or Windows rules',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='XuMing',
    author_email='xuming624@qq.com',
    license='Apache License 2.0',
    zip_safe=False,
    python_requires='>=3.8.0',
    entry_points={"console_scripts": ["cmdquote = cmdquote.cli:main"]},
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Shells',
        'Topic :: Text Processing',
    ],
    keywords='shell,quote,shlex,command-line,argv,CommandLineToArgvW',
    install_requires=[
        "loguru",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    packages=find_packages(exclude=['tests']),
    package_dir={'cmdquote': 'cmdquote'},
)
