import os
from setuptools import setup, find_packages

HERE = os.path.realpath(os.path.dirname(__file__))

VERSION_MODULE_PATH = os.path.join(HERE, "valueset", "version.py")
README_PATH = os.path.join(HERE, "README.md")


def get_version_string():
    version = {}
    with open(VERSION_MODULE_PATH) as f:
        exec(f.read(), version)
    return version['VERSION_STRING']


def get_readme():
    with open(README_PATH, encoding='utf-8') as f:
        return f.read()


setup(
    name='valueset',
    description='A mutable set with equality and hashing based upon its contents.',
    license="Apache-2.0",
    long_description=get_readme(),
    long_description_content_type="text/markdown",
    version=get_version_string(),
    packages=find_packages(exclude=['test', 'docs']),
    python_requires='>=3.7',
    install_requires=[
        'numpy>=1.19.4',
        'typing_extensions>=3.7.4.3'
    ],
    extras_require={
        "dev": ["flake8", "Sphinx", "pytest", "sphinx_rtd_theme", "tqdm", "twine"]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Software Development :: Libraries',
        'Topic :: Utilities'
    ],
    include_package_data=True
)
