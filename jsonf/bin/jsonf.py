#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser, RawDescriptionHelpFormatter
from sys import argv, stderr, stdout
from typing import Sequence, TextIO

from pithy.io import writeL

from ..batch import format_paths
from ..env import env_indent
from ..indent import compact_marker, resolve_indent


description = '''
jsonf - A simple JSON formatter

When invoked on a single file, the file will be reformatted and the output sent
to stdout. You may rewrite the original file(s) using the -w flag.

When invoked on a directory, the program will only operate on files ending in
.json. To operate on multiple files without the json extension, specify each one
as an additional argument.

When processing multiple files or one or more directories, the program will
output the filename of each file before it is processed, and will attempt to
continue when it encounters errors.

The path `-` reads JSON from standard input and always writes to standard output.
'''

epilog = '''
examples:
  jsonf -i sss myfile.json    Indent using 3 spaces and write to stdout
  jsonf -w -i t myfile.json   Indent using tabs and rewrite the original file
  jsonf -w .                  Rewrite all .json files in the current directory
  jsonf -w -r file1 file2 dir Rewrite file1, file2, and all .json files under dir

environment:
  JSONF_INDENT                Default indentation string when -i is not given.
'''


def main() -> None:
  exit(run(argv[1:]))


def run(args:Sequence[str], out:TextIO=stdout, err:TextIO=stderr) -> int:
  'Run the command line with `args`, writing results to `out` and diagnostics to `err`. Returns the exit status.'
  parser = ArgumentParser(prog='jsonf', description=description, epilog=epilog,
    formatter_class=RawDescriptionHelpFormatter)
  parser.add_argument('paths', nargs='*', help='Files or directories to format.')
  parser.add_argument('-w', dest='replace', action='store_true', help='Overwrite files in place.')
  parser.add_argument('-r', dest='recurse', action='store_true', help='Recurse into subdirectories.')
  parser.add_argument('-i', dest='indent', default=None,
    help="Indentation string (defaults to 2 spaces). 's' and 't' stand for space and tab characters.")
  parser.add_argument('-c', dest='compact', action='store_true',
    help='Compact (minify) rather than indent. -c wins over -i if both are specified.')
  ns = parser.parse_args(args)

  if not ns.paths:
    writeL(err, parser.format_help())
    return 1

  token = compact_marker if ns.compact else (env_indent() if ns.indent is None else ns.indent)
  spec = resolve_indent(token)

  summary = format_paths(ns.paths, spec, replace=ns.replace, recurse=ns.recurse, out=out, err=err)
  return summary.exit_code


if __name__ == '__main__': main()
