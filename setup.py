from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='stellarseed',
    version='0.1.0',
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'bip_utils>=2.7.0',
        'stellar-sdk>=9.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
    description='BIP-39 seed phrases and SLIP-10 key derivation for Stellar accounts',
    long_description=long_description,
    long_description_content_type="text/markdown"
)
