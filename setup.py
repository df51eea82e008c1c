# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='jsonf',
  version='0.1.0',
  description='jsonf is a simple JSON formatter that indents or compacts JSON files.',
  python_requires='>=3.14',
  install_requires=['pithy>=0.0.14'],

  packages=['jsonf', 'jsonf.bin'],
  entry_points={'console_scripts': ['jsonf=jsonf.bin.jsonf:main']},
)
