import os

from setuptools import setup, find_packages

install_requires = [
    "graphql-core>=3.2,<3.3",
    "yarl>=1.6,<2.0",
]

tests_requires = [
    "pytest==8.3.4",
    "pytest-cov==6.0.0",
]

dev_requires = [
    "black==25.1.0",
    "check-manifest>=0.42,<1",
    "flake8==7.1.2",
    "isort==6.0.1",
    "mypy==1.15",
    "types-requests",
] + tests_requires

install_requests_requires = [
    "requests>=2.26,<3",
]

install_all_requires = install_requests_requires

# Get version from __version__.py file
current_folder = os.path.abspath(os.path.dirname(__file__))
about = {}
with open(os.path.join(current_folder, "gql_builder", "__version__.py")) as f:
    exec(f.read(), about)

setup(
    name="gql-builder",
    version=about["__version__"],
    description="Build GraphQL documents programmatically, bound to a schema",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="api graphql query builder document gql client",
    packages=find_packages(include=["gql_builder*"]),
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"gql_builder": ["py.typed"]},
    install_requires=install_requires,
    extras_require={
        "all": install_all_requires,
        "test": install_all_requires + tests_requires,
        "test_no_transport": tests_requires,
        "dev": install_all_requires + dev_requires,
        "requests": install_requests_requires,
    },
    include_package_data=True,
    zip_safe=False,
    platforms="any",
)
