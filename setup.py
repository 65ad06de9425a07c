from setuptools import setup, find_packages
import pymidas

NAME = 'pymidas'
AUTHOR = 'Lars Yunker'

PACKAGES = find_packages(exclude=['tests'])
KEYWORDS = ', '.join([
    'mass spectrometry',
    'mass spec',
    'isotope pattern',
    'isotopic distribution',
    'fine-grained isotope pattern',
])

with open('README.MD') as f:
    long_description = f.read()

setup(
    name=NAME,
    version=pymidas.__version__,
    description='A Python library for calculating the fine-grained isotopic distributions of molecules.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=AUTHOR,
    packages=PACKAGES,
    license='MIT',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Chemistry',
        'Operating System :: OS Independent',
        'Natural Language :: English'
    ],
    install_requires=[
        'numpy>=1.14.2',
        'scipy>=1.1.0',
        'tqdm>=4.24.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'isospecpy>=2.0.2',  # used to cross-check calculated distributions
        ],
    },
    keywords=KEYWORDS,
)
