# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='freqhist',
  version='0.0.1',
  description='A frequency histogram of integer samples, with interpolated counts and percentile ranks.',
  python_requires='>=3.10',

  packages=['freqhist'],
  entry_points={'console_scripts': ['freqhist=freqhist.__main__:main']},
)
