# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="jbob",
    version="0.1.0",
    description="Runtime for the J-Bob proof language, a tiny subset of Scheme",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["jbob", "jbob.*", "jbob_lsp", "jbob_lsp.*"]),
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
