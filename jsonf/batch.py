# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Formatting of path arguments, one file at a time.
Errors for individual files are reported and recorded in a FormatSummary, and processing continues.
'''

import os as _os
from dataclasses import dataclass, field
from sys import stdin
from tempfile import mkstemp
from typing import BinaryIO, Iterable, List, TextIO, Tuple

from pithy.fs import file_permissions, is_dir
from pithy.io import writeL, writeZ
from pithy.path import Pathish

from .exceptions import error_msg, jsonf_errors, WriteError
from .fs import select_files
from .indent import IndentSpec
from .json import format_json_bytes, format_json_file


stdin_path = '-'


@dataclass
class FormatSummary:
  'The outcome of a batch run: every file that was attempted, and the failures.'
  paths: List[str] = field(default_factory=list)
  errors: List[Tuple[str, BaseException]] = field(default_factory=list)

  @property
  def ok(self) -> bool: return not self.errors

  @property
  def exit_code(self) -> int: return 0 if self.ok else 1

  def add_error(self, path:str, exc:BaseException) -> None:
    self.errors.append((path, exc))


def report_error(err:TextIO, path:str, exc:BaseException) -> None:
  writeL(err, f'error: {path}: {error_msg(exc)}', flush=True)


def write_formatted(path:Pathish, text:str) -> None:
  '''
  Replace the contents of the file at `path` with `text`.
  The text is written to a temporary file in the same directory, which is then renamed over the original,
  so that a failure never leaves a partially written file. The original permission bits are preserved.
  If `path` is a symlink, the file it resolves to is rewritten and the link is left in place.
  '''
  path = _os.fspath(path)
  target = _os.path.realpath(path)
  mode = file_permissions(target, follow=True)
  dir_path = _os.path.dirname(target)
  try:
    fd, tmp_path = mkstemp(dir=dir_path, prefix='.' + _os.path.basename(target) + '.', suffix='.jsonf')
  except OSError as e:
    raise WriteError(path, f'could not create temporary file: {error_msg(e)}') from e
  try:
    with open(fd, 'w', encoding='utf-8', newline='') as f:
      f.write(text)
    _os.chmod(tmp_path, mode)
    _os.replace(tmp_path, target)
  except OSError as e:
    try: _os.remove(tmp_path)
    except FileNotFoundError: pass
    raise WriteError(path, f'could not write file: {error_msg(e)}') from e


def format_file(path:str, spec:IndentSpec, replace:bool, out:TextIO) -> None:
  'Format a single file, writing the result either to `out` or back to the file.'
  if path == stdin_path:
    writeZ(out, format_stdin(stdin.buffer, spec), flush=True)
    return
  text = format_json_file(path, spec)
  if replace:
    write_formatted(path, text)
  else:
    writeZ(out, text, flush=True)


def format_stdin(f:BinaryIO, spec:IndentSpec) -> str:
  return format_json_bytes(f.read(), spec)


def format_path(path:str, spec:IndentSpec, replace:bool, recurse:bool, headers:bool, summary:FormatSummary,
 out:TextIO, err:TextIO) -> None:
  '''
  Format a path argument.
  A directory is expanded to its json files, each of which is preceded by a header line;
  a file is preceded by a header line only if `headers` is set.
  Subdirectories that cannot be listed are reported and skipped.
  '''
  def dir_error(dir_path:str, exc:OSError) -> None:
    summary.add_error(dir_path, exc)
    report_error(err, dir_path, exc)

  if path != stdin_path and is_dir(path, follow=True):
    for file_path in select_files(path, recurse=recurse, on_error=dir_error):
      writeL(out, f'--- {file_path}', flush=True)
      _format_one(file_path, spec, replace, summary, out, err)
  else:
    if headers:
      writeL(out, f'--- {path}', flush=True)
    _format_one(path, spec, replace, summary, out, err)


def _format_one(path:str, spec:IndentSpec, replace:bool, summary:FormatSummary, out:TextIO, err:TextIO) -> None:
  summary.paths.append(path)
  try: format_file(path, spec, replace=replace, out=out)
  except jsonf_errors as e:
    summary.add_error(path, e)
    report_error(err, path, e)


def format_paths(paths:Iterable[str], spec:IndentSpec, replace:bool, recurse:bool, out:TextIO, err:TextIO) -> FormatSummary:
  '''
  Format each path argument in order, and return the summary of the run.
  Headers are printed for every file when more than one argument is given.
  '''
  paths = list(paths)
  headers = len(paths) > 1
  summary = FormatSummary()
  for path in paths:
    try: format_path(path, spec, replace=replace, recurse=recurse, headers=headers, summary=summary, out=out, err=err)
    except OSError as e: # Directory listing failed.
      summary.add_error(path, e)
      report_error(err, path, e)
  return summary
