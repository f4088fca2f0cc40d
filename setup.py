from setuptools import setup, find_packages

# Read the README.md file for the long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="rframe",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyarrow>=10.0.0",
        "pandas>=1.0.0",
        "numpy>=1.20.0",
        "pyyaml>=5.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="Build a fixed data frame for hand-off to a statistical host via Arrow or pandas",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
