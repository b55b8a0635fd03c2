from setuptools import setup, find_packages


setup(
    name="jarversion",
    version="1.0.0",
    packages=find_packages(include=["jarversion", "jarversion.*"]),
    description="Query Implementation-/Specification-Version and an MD5 content hash from JAR files.",
    author="vercingetorx",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    entry_points={
        "console_scripts": [
            "jarversion=jarversion.cli:main",
        ]
    },
)
