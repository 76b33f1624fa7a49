from setuptools import find_packages, setup

with open("README.md") as f:
    long_description = f.read()

setup(
    name="ordstats",
    version="0.1.0",
    description="Selection, quantiles, and order statistics for numpy arrays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["ordstats", "ordstats.*"]),
    package_dir={"ordstats": "ordstats"},
    test_suite="tests",
    python_requires=">=3.8",
    install_requires=["numba", "numpy", "xarray"],
    extras_require={
        "dev": [
            "black",
            "pytest",
            "pytest-cov",
        ],
    },
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    keywords="quantile percentile median selection quickselect order statistics",
)
