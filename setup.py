import os
from os.path import join, dirname

from setuptools import setup, find_packages

from extcal import __version__

os.umask(0o022)


def read_requirements(filename):
    with open(join(dirname(__file__), filename)) as f:
        return [l.strip() for l in f if l.strip() and not l.startswith('#')]


setup(
    name='extcal',
    version=__version__,
    description="Conversions between the Gregorian, Julian, French Republican and Jewish calendars",
    license='CC0',
    packages=find_packages(exclude=['tests']),
    long_description="Julian day conversions for historical calendars, and the functions of PHP's calendar extension",
    install_requires=read_requirements('requirements.txt'),
    extras_require={'test': read_requirements('requirements-test.txt')},
    python_requires='>=3.7',
    keywords='calendar julian day gregorian jewish hebrew french republican gedcom',
    include_package_data=True,
    zip_safe=False,
)
