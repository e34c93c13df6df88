from setuptools import setup, find_packages
import dispatchgen


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='dispatchgen',
    description="Dispatch code generator for table driven parsers and scanners",
    long_description=long_description,
    version=dispatchgen.__version__,
    author='Windel Bouwman',
    packages=find_packages(exclude=["*.test.*", "test"]),
    entry_points={
        'console_scripts': [
            'dispatchgen-generate = dispatchgen.cli.generate:generate',
        ]
    },
    extras_require={
        'test': ['pytest'],
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: C',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
        'Topic :: Software Development :: Code Generators',
    ]
)
