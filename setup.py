import setuptools

with open('README.md', 'r', encoding='utf-8') as fh:
    long_description = fh.read()

setuptools.setup(
    name='coldef',
    version='0.0.1',
    author='vaxy',
    author_email='ordinaryparksee@gmail.com',
    description='MySQL column definitions rendered as SHOW CREATE TABLE does',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Operating System :: OS Independent',
    ],
    package_dir={'': 'src'},
    packages=setuptools.find_packages(where='src'),
    python_requires='>=3.7',
    install_requires=[
        'SQLAlchemy>=1.4',
        'rich',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
