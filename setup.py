import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="holoview",
    version="0.1.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Interactive geometry and safety margin viewer for "
                "holographic displays",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['holography', 'holographic display', 'diffraction',
              'geometric optics', 'ray tracing', 'laser safety'],
    install_requires=[
        "numpy>=1.15.0",
        "matplotlib>=3.6",
        "json_tricks>=3.12.1",
        "pandas>=0.23.4",
        "attrs>=18.1.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
    entry_points={
        'gui_scripts': [
            'holoview = holoview.mpl.holoviewapp:main',
        ],
    },
)
