from setuptools import setup, find_packages

# Test and install dependencies kept together - pytest is lightweight.
setup(name="rtc", version=0.1, description="Homogeneous coordinates for ray tracing",
      packages=find_packages(include=['rtc', 'rtc.*']),
      install_requires=['numpy', 'numba', 'pyyaml', 'pytest'], python_requires='>=3.7')
