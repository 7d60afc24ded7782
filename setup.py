from setuptools import find_packages, setup  # isort: skip


setup(
    name="tracebatch",
    version="0.1.0",
    description="Batch and serialize traces into size-bounded payloads for a trace collector",
    packages=find_packages(exclude=["tests*"]),
    package_data={
        "tracebatch": ["py.typed"],
    },
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=[
        "msgpack>=1.0.0",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "mock",
            "pytest",
        ],
    },
)
