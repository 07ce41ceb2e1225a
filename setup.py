from setuptools import setup, find_packages


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqStream",
    version="0.3.0",
    description="Lazy, chainable streams over python iterables",
    long_description=long_description,
    keywords=['stream', 'lazy', 'iterator', 'pipeline', 'functional'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=["tests", "tests.*", "docs", "docs.*"]),
    python_requires=">=3.6",
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'numpy']
    }
)
