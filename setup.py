from setuptools import setup, find_packages

setup(
    name='evo_agents',
    version='0.1.0',
    description='Feedforward networks evolved with a genetic algorithm.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['numpy', 'gin-config', 'jax', 'dm-haiku'],
    extras_require={'test': ['pytest']},
)
