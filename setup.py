from setuptools import setup

setup(
    name='tau-interpreter',
    version='0.3.0',
    description='Tau language tree-walking interpreter',
    author='Tau contributors',
    package_dir={'tau': 'src/tau'},
    packages=['tau', 'tau.cli', 'tau.evaluator', 'tau.parser', 'tau.stdlib'],
    include_package_data=True,
    python_requires='>=3.11',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'tau = tau.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
