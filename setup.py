import setuptools


setuptools.setup(
    name='panda3d-ashikhminlut',
    version='0.1.0',
    description='Bake Ashikhmin-Shirley half-vector importance sampling LUTs for Panda3D',
    python_requires='>=3.9',
    packages=['ashikhminlut'],
    install_requires=[
        'panda3d',
        'typing_extensions',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'ashikhmin-genlut=ashikhminlut.genlut:main',
        ],
    },
)
