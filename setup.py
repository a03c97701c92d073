from glob import glob
from setuptools import setup


setup(
    name='decrpn',
    use_scm_version={
        # Allow building from a tarball, without any VCS metadata.
        'fallback_version': '0.1.0',
    },
    description='RPN calculator with exact decimal arithmetic',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['decrpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
