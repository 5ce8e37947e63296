from setuptools import setup, find_packages

setup(
    name='scriptvars',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    version='0.1',
    description='A bounded, thread-safe variable store for sharing state between scripts',
    keywords=['scripting', 'variables', 'key-value', 'store'],
    classifiers=['Development Status :: 3 - Alpha',
                 'Intended Audience :: Developers',
                 'Topic :: Software Development :: Libraries',
                 'Programming Language :: Python :: 3'],
    python_requires='>=3.10',
    install_requires=['rich', 'blinker'],
    extras_require={
        'test': ['pytest'],
    },
)
