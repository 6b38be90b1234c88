import setuptools

setuptools.setup(
    name='sosenvelope',
    version='0.1.0',
    author='Riley John Murray',
    description='Sum-of-squares instances for lower envelopes of univariate polynomials',
    packages=setuptools.find_packages(exclude=['examples', 'examples.*']),
    classifiers=[
        'Programming Language :: Python',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics'
    ],
    python_requires='>=3.6',
    install_requires=["numpy >= 1.17",
                      "scipy >= 1.1",
                      'tqdm'],
    extras_require={'test': ['nose2']},
    test_suite='nose2.collector'
)
