from setuptools import setup

trove_classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "License :: OSI Approved :: MIT License",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: Implementation :: CPython",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
    ]

setup(name="pgpwords",
      version="0.1.0",
      description="Read out binary fingerprints with the PGP Word List",
      long_description=open('README.md').read(),
      long_description_content_type='text/markdown',
      license="MIT",
      classifiers=trove_classifiers,
      python_requires=">=3.10",

      package_dir={"": "src"},
      packages=["pgpwords",
                "pgpwords.cli",
                "pgpwords.test",
                ],
      entry_points={
          "console_scripts":
          [
              "pgpwords = pgpwords.cli.cli:pgpwords",
          ]
      },
      install_requires=[
          "attrs >= 19.2.0",
          "zope.interface",
          "twisted",
          "click",
      ],
      extras_require={
          "dev": [
              "pyflakes",
              "pytest",
              "hypothesis",
          ],
      },
      test_suite="pgpwords.test",
      )
