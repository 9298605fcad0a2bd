from setuptools import find_packages, setup

setup(
    name="cql-exec",
    version="1.0.0",
    description='Execute CQL statements against a Scylla or Apache Cassandra node, e.g. before integration tests',
    url='https://github.com/scylladb/scylla',
    license='LicenseRef-ScyllaDB-Source-Available-1.0',
    platforms='any',
    packages=find_packages(include=["cql_exec", "cql_exec.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "scylla-driver",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["cql-exec = cql_exec.cli:main"],
        "pytest11": ["cql_exec = cql_exec.pytest_plugin"],
    },
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Framework :: Pytest",
    ],
)
