#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""The setup script."""


from setuptools import find_packages, setup

with open('README.rst', encoding='utf-8') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst', encoding='utf-8') as history_file:
    history = history_file.read()

install_requires = [
]

extras_require = {
    'test': ['pytest'],
}

setup_requires = [
]

tests_require = [
    'pytest',
]


def files(dir):
    import glob
    import os
    return [f.replace('/', os.sep) for f in glob.glob(os.path.join(dir, '*'))
            if os.path.isfile(f) and os.path.basename(f) != '__init__.py']


def entry_point(filename):
    import os.path
    import re
    if not os.path.exists(filename):
        raise ValueError(f'File {filename} does not exist')
    f = re.match(r'^(.*)\.py$', filename).group(1)
    return f'{os.path.basename(f)}={f.replace(os.sep, ".")}:main'


def entry_points(dir):
    res = [entry_point(f) for f in files(dir) if f.endswith('.py')]
    if len(res) == 0:
        raise ValueError(f'Could not find a single entrypoint in {dir}')
    return res


setup(
    name='quotemeta',
    version='0.1.0',
    description="Shell-quoting of file names and raw byte strings",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/x-rst',
    packages=find_packages(),
    entry_points={
        'console_scripts': entry_points('quotemeta/app'),
    },
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    setup_requires=setup_requires,
    tests_require=tests_require,
    python_requires='>=3.6',
    license="MIT license",
    zip_safe=False,
    keywords='quotemeta shell quoting',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Shells',
    ],
)
