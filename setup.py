from setuptools import setup

setup(
    name='splinekit',
    version='0.0.1',
    license='MIT',
    description="Library for evaluating non-uniform B-spline curves of any degree",
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=['splinekit'],
    python_requires='>=3.8',
    install_requires=['numpy','scipy'],
    extras_require={'test': ['pytest']},
    keywords=['bspline', 'b-spline', 'spline', 'de boor', 'arc length'],
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python :: 3',
    ]
)
