import codecs
import os
import re

from setuptools import setup


def open_local(paths: list, mode='r', encoding='utf-8'):
    path = os.path.join(
        os.path.abspath(os.path.dirname(__file__)),
        *paths
    )
    return codecs.open(path, mode, encoding)


with open_local(['README.md']) as f:
    long_description = f.read()

with open_local(['bstmap', '__init__.py']) as fp:
    try:
        version = re.findall(r"^__version__ = '([^']+)'\r?$",
                             fp.read(), re.M)[0]
    except IndexError:
        raise RuntimeError('Unable to determine version.')

setup(
    name='bstmap',
    version=version,
    packages=['bstmap'],
    zip_safe=True,
    license='MIT',
    description='bstmap is an in-memory ordered key-value map backed by a plain binary search tree.',
    keywords='binary-search-tree ordered-map key-value data-structure',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'rwlock'
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis'
        ]
    },
    platforms='any',
    python_requires=">=3.6",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python :: 3',
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        'Operating System :: OS Independent',
        'Natural Language :: English'
    ]
)
