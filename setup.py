import os
import re
from setuptools import setup, find_packages


with open(os.path.join("optionvalue", "__init__.py"), "r") as f:
    version = re.search(r"__version__\s*=\s*['\"]([^'\"]*)['\"]", f.read()).group(1)


setup(
    name='optionvalue',
    version=version,
    description='An immutable value that may or may not be present',
    long_description='',
    packages=find_packages(),
    install_requires=[],
    extras_require={
        'test': ['pytest', 'msgpack'],
    },
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
