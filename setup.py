""" ecexplorer build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecexplorer

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecexplorer.name,
    version=ecexplorer.__version__,
    license=ecexplorer.__license__,
    author=ecexplorer.__author__,
    author_email=ecexplorer.__author_email__,
    description="Explore the point group of small elliptic curves over Fp",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ecexplorer=ecexplorer.__main__:main"]},
    keywords="elliptic-curves finite-fields cyclic-subgroups didactic",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
