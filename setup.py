from setuptools import setup, find_packages

setup(
    name="css-asset-optimizer",
    version="1.0.0",
    packages=find_packages(),
    package_data={
        'css_optimizer.tests': ['css_test_files/*.css', 'css_test_files/*/*.css', 'css_test_files/*/*/*.css'],
    },
    install_requires=[
        'chardet',
        'typing-extensions'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout'
        ]
    },
    python_requires='>=3.8',
    author="Kenneth Hanks",
    author_email="fourfigs@gmail.com",
    description="Minifies file CSS assets, inlining @import rules and rewriting url() references",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    url="https://github.com/fourfigs/css-asset-optimizer",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
