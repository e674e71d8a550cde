from setuptools import find_packages, setup

# Installation :
#   pip install -e .
#   pip install -e .[test]   (pytest + httpx pour les tests de l'API)

setup(
    name='walkaround-checks',
    version='1.0.0',
    description="Contrôles quotidiens des véhicules : saisie, historique et export PDF",
    packages=find_packages(include=['walkaround_checks', 'walkaround_checks.*']),
    python_requires='>=3.10',
    install_requires=[
        'fastapi>=0.110',
        'uvicorn>=0.29',
        'pydantic>=2.6',
        'reportlab>=4.0',
    ],
    extras_require={
        'test': ['pytest>=8.0', 'httpx>=0.27'],
    },
    entry_points={
        'console_scripts': ['walkaround-checks=walkaround_checks.cli:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Framework :: FastAPI',
    ],
)
