import os
from setuptools import setup
import codecs

readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
with codecs.open(readme_path, encoding='utf8') as f:
    readme = f.read()

setup(
    name='dynarray',
    version='0.1.0',
    description='Resizable array with an explicit growth policy, and string/array algorithms built on it',
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT',
    py_modules=['_dynarray_version'],
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    test_suite='tests',
    tests_require=['pytest', 'hypothesis', 'typing_extensions'],
    extras_require={
        'test': ['pytest', 'hypothesis', 'typing_extensions'],
        'benchmark': ['pyperform'],
    },
    scripts=[],
    packages=['dynarray'],
    package_data={'dynarray': ['py.typed', '__init__.pyi']},
    python_requires='>=3.9',
)
