#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, pathsep
from os.path import abspath
from subprocess import run
from sys import executable

from pithy.io import errL, outL

from jsonf.exceptions import error_msg
from jsonf.fs import select_files


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  work_dir = getcwd()
  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', work_dir)
  env['PYTHONPATH'] = pathsep.join(p for p in [work_dir, environ.get('PYTHONPATH', '')] if p)

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for arg in args.paths:
    try: paths = select_files(arg, recurse=True, suffix='.ut.py')
    except OSError as e:
      errL(f'error: {arg}: {error_msg(e)}')
      ok = False
      continue
    for path in paths:
      outL(path, flush=True)
      c = run([executable, abspath(path)], cwd=utest_cwd, env=env).returncode
      if c != 0:
        ok = False
        outL()

  exit(0 if ok else 1)


if __name__ == '__main__': main()
