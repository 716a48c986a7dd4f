from setuptools import setup, find_packages

setup(
    name="connect4",
    version="0.2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
