import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="mohrview",
    version="0.1.0",
    author="MohrView authors",
    description="Plane stress transformation and animated Mohr's circle "
                "geometry.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'plot': ['matplotlib'],
        'test': ['pytest', 'matplotlib'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='stress transformation mohr circle mechanics',
    long_description=long_description,
    long_description_content_type="text/markdown",
    setup_requires=["numpy"],
    packages=setuptools.find_packages(include=['mohrview', 'mohrview.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering"
    ]
)
