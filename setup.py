# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="ssinject",
    version="1.0.0",
    description="Expande directivas SSI #include virtual en árboles HTML estáticos",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["ssinject*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'ssinject=ssinject.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
