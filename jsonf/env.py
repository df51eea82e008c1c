# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os import environ


default_indent = '  '


def env_indent() -> str:
  'Get the default indent spec token specified by the environment variable JSONF_INDENT. Defaults to two spaces.'
  return environ.get('JSONF_INDENT') or default_indent
