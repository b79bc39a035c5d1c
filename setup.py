from os import path

from setuptools import setup

this_dir = path.abspath(path.dirname(__file__))
with open(path.join(this_dir, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="DataMapper",
    description="DataMapper - unit of work registry for tracking new, dirty and deleted entities",
    long_description=long_description,
    long_description_content_type="text/markdown",
    version="0.1",
    license="MIT",
    packages=["datamapper", "datamapper.test", "datamapper.core"],
    package_data={
        "datamapper": ["py.typed"],
        "datamapper.core": ["py.typed"],
        "datamapper.test": ["py.typed"],
    },
    keywords=["datamapper", "unit-of-work", "ddd", "persistence"],
    python_requires=">=3.9",
    install_requires=[
        "uvicorn",
        "colorama",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
    ],
)
