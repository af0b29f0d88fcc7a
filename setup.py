"""Setup script for flagbench package."""

from setuptools import setup, find_packages

setup(
    name='flagbench',
    version='1.0',
    packages=find_packages(include=['flagbench', 'flagbench.*']),
    package_data={'flagbench.config': ['defaults.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.9.0',
        'pyyaml>=6.0',
        'psutil>=5.9.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'flagbench=flagbench.cli:main',
        ],
    },
)
