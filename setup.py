from setuptools import setup, find_packages

setup(
    name='solar-spa',
    version='1.0.0',
    description='NREL Solar Position Algorithm for solar radiation applications',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.9',
    install_requires=['numpy >= 1.19.4'],
    extras_require={
        'jit': ['numba', 'scipy'],
        'test': ['pytest'],
    },
)
