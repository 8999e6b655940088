from setuptools import setup, find_packages

__version__ = '1.0.0'

requirements = [
    'coloredlogs>=15.0',
    'sanic>=23.6',
]

test_requirements = [
    'pytest',
    'sanic-testing>=23.6',
]

setup(
    name='tokenledger',
    version=__version__,
    description='Fungible token ledger with allowances, role-gated minting and burning.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
