from setuptools import setup, find_packages

with open("README.md") as file:
    long_description = file.read()

REQUIREMENTS = [
    "requests",
    "ruamel.yaml",
]

EXTRAS = {
    "test": ["pytest"],
}

setup(
    name="fam-client",
    version="0.1.0",
    description="Client-side models and collections synced through a FAM RDT",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=REQUIREMENTS,
    extras_require=EXTRAS,
    license="Apache 2.0",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
