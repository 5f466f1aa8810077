from setuptools import find_packages, setup

setup(
  name="curvelab",
  author="Curvelab",
  description="Elliptic curve algebra, ECDH and ECDSA over small fields",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  use_scm_version={"fallback_version": "0.1.0"},
  setup_requires=["setuptools_scm"],
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Education",
  ],
  install_requires=[
    "colorama>=0.4",
    "cryptography>=35",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(console_scripts=["curvelab = curvelab.cli.__main__:main"],),
)
