from setuptools import find_packages, setup

package_name = 'point_kinematics'

setup(
    name='point-kinematics',
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    install_requires=[
        'numpy',
        'matplotlib',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    zip_safe=True,
    description='Trajectory, velocity, acceleration and curvature of a point '
                'moving by a closed-form law',
    license='Apache-2.0',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'point-kinematics = point_kinematics.cli:main',
        ],
    },
)
