from setuptools import setup, find_packages

setup(
    name='facial_mocap_sdk_python',
    version='0.1.0',
    description='Real-time iFacialMocap head pose and blend shape receiver',
    packages=find_packages(include=['facial_mocap_sdk_python', 'facial_mocap_sdk_python.*']),
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'scipy>=1.14',
    ],
    extras_require={
        'examples': ['loop_rate_limiters'],
        'test': ['pytest'],
    },
)
