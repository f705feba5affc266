from setuptools import setup


def readme():
    with open("README.md") as f:
        return f.read()


setup(
    name="componentry",
    version="0.1.0",
    description="Runtime composition of components for Python 3",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="components composition dependency resolution fellow root scope",
    license="MIT",
    packages=["componentry"],
    install_requires=[],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    zip_safe=False,
)
