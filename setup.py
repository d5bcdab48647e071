"""Set up TomDocSh."""

from setuptools import setup, find_packages

import tomdocsh


setup(
    name='tomdocsh',
    version=tomdocsh.__version__,
    description="generate Markdown documentation from TomDoc'd shell scripts",
    packages=find_packages(exclude=['tests']),
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['tomdocsh=tomdocsh.cmdline:main']},
)
