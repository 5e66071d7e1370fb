from setuptools import setup

with open('README.rst', 'r') as fh:
    long_description = fh.read().replace('.. include:: toc.rst\n\n', '')

# The lines below are parsed by `docs/conf.py`.
name = 'g2codec'
version = '0.1.0'

setup(
    name=name,
    version=version,
    packages=[name,],
    package_dir={'': 'src'},
    install_requires=[
        'py_ecc~=7.0'
    ],
    extras_require={
        'docs': [
            'sphinx~=4.2.0',
            'sphinx-rtd-theme~=1.0.0'
        ],
        'test': [
            'bitlist~=0.7',
            'fountains~=1.3',
            'pytest~=7.0',
            'pytest-cov~=3.0'
        ],
        'lint': [
            'pylint~=2.14.0'
        ],
        'coveralls': [
            'coveralls~=3.3.1'
        ],
        'publish': [
            'setuptools~=62.0',
            'wheel~=0.37',
            'twine~=4.0'
        ]
    },
    license='MIT',
    url='https://github.com/nthparty/g2codec',
    author='Andrei Lapets',
    author_email='a@lapets.io',
    description='Python library for validating, encoding, and decoding ' + \
                'points in the G2 subgroup of the BLS12-381 curve and ' + \
                'for performing group operations on them.',
    long_description=long_description,
    long_description_content_type='text/x-rst',
)
