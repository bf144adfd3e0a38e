from setuptools import setup, find_packages

setup(
    name="gamemath",
    version="1.0.0",
    description="Vectors, quaternions, and matrices for 3D rotations and transforms",
    packages=find_packages(include=["gamemath", "gamemath.*"]),
    python_requires=">=3.11",
    install_requires=["numpy", "pandas"],
    extras_require={"test": ["pytest"]},
)
