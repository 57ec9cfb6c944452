from setuptools import setup

setup(
    name='jhsiao-pyfile',
    version='0.0.1',
    author='Jason Hsiao',
    author_email='oaishnosaj@gmail.com',
    description='Classic Python file objects over native file handles',
    packages=['jhsiao.pyfile'],
    python_requires='>=3.6',
    extras_require={'test': ['pytest']},
)
