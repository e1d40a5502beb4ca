#!/usr/bin/env python

from setuptools import setup


# Modified from http://stackoverflow.com/questions/2058802/
# how-can-i-get-the-version-defined-in-setup-py-setuptools-in-my-package
def version():
    import os
    import re

    init = os.path.join("seqstats", "__init__.py")
    with open(init) as fp:
        initData = fp.read()
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", initData, re.M)
    if match:
        return match.group(1)
    else:
        raise RuntimeError("Unable to find version string in %r." % init)


scripts = [
    "bin/seq-stats.py",
]

setup(
    name="seq-stats",
    version=version(),
    packages=["seqstats"],
    keywords=["FASTQ", "GC content", "read length"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    license="MIT",
    description="Read length and GC content distributions for FASTQ files",
    python_requires=">=3.10",
    scripts=scripts,
    install_requires=[
        "progressbar2>=3.53",
    ],
    extras_require={
        "test": [
            "biopython>=1.71",
            "pytest",
        ],
    },
)
