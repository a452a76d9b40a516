import os
from setuptools import setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name = "porterstem",
    version = "0.1.0",
    author = "Agapitus Keyka Vigiliant",
    author_email = "keka.vigi@gmail.com",
    description = ("Package for stemming English words with the Porter algorithm."),
    license = "MIT",
    keywords = "linguistic stemming english porter",
    url = "http://github.com/kekavigi/porterstem",
    package_dir={"": "src"},
    packages=["porterstem"],
    package_data={"porterstem": ["data/*.txt"]},
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["porterstem=porterstem.__main__:main"]},
    long_description=read('README.md'),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
    ],
 )
