from setuptools import setup, find_packages


setup(name='travgrid',
      version='0.1.0',
      package_dir={"": "src"},
      description='Time-based traversal costs over traversability grids for sampling-based planners',
      license="MIT",
      packages=find_packages("src"),
      python_requires=">=3.9",
      install_requires=[
          "numpy",
      ],
      extras_require={
          "test": ["pytest"],
      })
