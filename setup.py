import setuptools

setuptools.setup(
    name='countstat',
    packages=setuptools.find_packages(exclude=['tests']),
    version='0.1.0',
    description='Word and character counts of text files, reported as a tree',
    long_description=open('README.md', 'r', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'pyperclip',
        'tinysegmenter',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'countstat=countstat.cli:main_entry',
        ],
    },
)
