import re
from pathlib import Path

from setuptools import find_packages, setup

version = re.search(
    r'^__version__ = "([^"]+)"',
    Path("src/typedhash/__about__.py").read_text(),
    re.MULTILINE,
).group(1)

if __name__ == "__main__":
    setup(
        name="typedhash",
        version=version,
        description="EIP-712 typed data and Safe{Wallet} message and transaction hashing",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.10",
        install_requires=["msgspec>=0.18"],
        extras_require={"test": ["pytest>=7", "pycryptodome>=3.15"]},
        entry_points={"console_scripts": ["typedhash = typedhash.cli:main"]},
    )
