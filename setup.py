from setuptools import setup
from sha512utils import __version__

with open("README.rst") as readme:
    long_description = readme.read()

setup(
    name="sha512-utils",
    version=__version__,
    description="Pure Python SHA-512 digest engine and utilities",
    long_description=long_description,
    author="The python-sha512-utils developers",
    license="MIT",
    keywords="sha512 sha-512 hash digest fips-180-4",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    packages=["sha512utils"],
    py_modules=["sha512_utils_cli"],
    entry_points={
        "console_scripts": ["sha512-utils=sha512_utils_cli:main"],
    },
    zip_safe=False,
)
