from setuptools import setup, find_packages

setup(
    name="gitaur",
    version="0.1.0",
    description="gitaur: search, clone and build AUR packages from the AUR git mirror",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich", "pygit2>=1.14", "requests"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gitaur=gitaur.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
