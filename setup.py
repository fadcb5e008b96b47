import os
import pathlib

from setuptools import find_packages, setup

here = pathlib.Path(os.path.dirname(os.path.abspath(__file__)))

with open(str(here / "README.rst"), "r") as f:
    readme = f.read()

setup(
    name="proxied",
    version="0.1.0",
    description="Interface resolution and introspection for dynamic proxies.",
    long_description=readme,
    packages=find_packages("src"),
    package_dir={"": "src"},
    package_data={"proxied": ["py.typed"]},
    python_requires=">=3.8,<4",
    install_requires=["typing_extensions>=4.6"],
    extras_require={"test": ["pytest"]},
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
    keywords="proxy interface introspection",
    zip_safe=False,
)
