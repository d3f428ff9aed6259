import setuptools


with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name="jsondir",
    version="1.0.0",
    description="A tiny key-value store that keeps every record as a JSON file on disk.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=("tests",)),
    python_requires=">=3.6",
    classifiers=(
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ),
    install_requires=[
        "PyYAML>=5.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
