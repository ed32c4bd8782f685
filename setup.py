from setuptools import find_packages, setup


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="faulttree",
    version="0.1.0",
    description="Fault tree model registry and primary event classification.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"faulttree.schemas": ["*.json"]},
    python_requires=">=3.9",
    install_requires=["networkx", "PyYAML", "jsonschema"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest"],
)
