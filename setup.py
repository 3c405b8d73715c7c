from setuptools import setup, find_namespace_packages

setup(
    name='jhsiao-bufio',
    version='0.0.1',
    author='Jason Hsiao',
    author_email='oaishnosaj@gmail.com',
    description='Buffered io readers/writers generic over their error type',
    packages=find_namespace_packages(include=['jhsiao.*']),
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest', 'numpy'],
    },
)
