from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

# use the in house version number so we stay in synch with ourselves.
from topljavac.version import topljavac_version

setup(
    name='topljavac',
    version=topljavac_version,
    description='javac wrapper that instruments classes with toplc',
    long_description=long_description,

    include_package_data=True,

    packages=find_packages(exclude=['test']),

    python_requires='>=3.6',

    entry_points = {
        'console_scripts': [
            'topljavac = topljavac.topljavac:main',
            'topljavac-sanity-checker = topljavac.sanity:main',
        ],
    },

    license='MIT',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Natural Language :: English',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Compilers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: MacOS',
        'Operating System :: POSIX :: Linux',
        'Operating System :: POSIX :: BSD',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
