# setup.py
from setuptools import setup, find_packages

setup(
    name="clove",
    version="0.1.0",
    description="Reader and value model for the Clove Lisp dialect",
    packages=find_packages(include=["clove", "clove.*", "clove_lsp", "clove_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.3,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "clove-ls=clove_lsp.server:main",
        ],
    },
    zip_safe=False,
)
