from glob import glob
from setuptools import setup


setup(
    name='rpnpad',
    version='0.1.0',
    description='Two operand RPN keypad calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpnpad'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'hypothesis',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
