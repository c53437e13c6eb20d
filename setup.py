from setuptools import setup, find_packages

setup(
    name="probtree",
    version="0.1.0",
    description="Lazy probabilistic choice trees with depth-bounded exploration",
    author="probtree Authors",
    packages=find_packages(exclude=["tests", "testing", "testing.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
