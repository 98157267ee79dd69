from setuptools import setup, find_packages

setup(
    name="propatlas",
    version="0.1.0",
    description="Theorem prover for classical propositional logic",
    author="PropAtlas Contributors",
    author_email="",

    # Find packages in the src/ directory
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"propatlas": ["configs/*.yaml"]},

    zip_safe=False,
    python_requires=">=3.10",

    install_requires=[
        "lark",
        "networkx",
        "pyyaml",
        "tqdm",
        "python-dotenv",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "propatlas=propatlas.cli.prove:main",
        ],
    },
)
