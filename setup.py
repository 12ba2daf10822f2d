from setuptools import setup, find_packages
import nescprint


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='nescprint',
    description="Render nesC syntax trees back into readable source code",
    long_description=long_description,
    version=nescprint.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    package_data={'': ["*.rst"]},
    install_requires=['pygments'],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'nescprint = nescprint.__main__:main',
            'nescprint-dump = nescprint.cli.dump:dump',
            'nescprint-render = nescprint.cli.render:render',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: C',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Software Development :: Embedded Systems',
    ]
)
