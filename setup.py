""" hdkeys build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import hdkeys

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=hdkeys.name,
    version=hdkeys.__version__,
    license=hdkeys.__license__,
    author=hdkeys.__author__,
    author_email=hdkeys.__author_email__,
    description="SLIP-0010 hierarchical deterministic key derivation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"hdkeys": ["_data/*.json"]},
    include_package_data=True,
    install_requires=["PyNaCl>=1.4"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "slip10 slip-0010 bip32 bip44 hd-wallet key-derivation "
        "ed25519 secp256k1 nist256p1 solana"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
