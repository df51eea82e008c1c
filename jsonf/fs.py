# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Callable, Iterator, List

from pithy.fs import is_dir, scan_dir
from pithy.path import norm_path, path_join, Pathish, str_path


json_ext = '.json'

OnDirError = Callable[[str, OSError], None]


def select_files(root:Pathish, recurse:bool, suffix:str=json_ext, on_error:OnDirError|None=None) -> List[str]:
  '''
  Select the files to operate on for a path argument.
  If `root` is a file, it is returned as the only element, regardless of its name.
  If `root` is a directory, return the paths of the files in it whose names end with `suffix`;
  subdirectories are only searched if `recurse` is true.
  Raises OSError if `root` cannot be stat'ed or listed.
  A subdirectory that cannot be listed is passed to `on_error` and skipped;
  if `on_error` is None, the error is raised.
  '''
  path = str_path(root)
  if not is_dir(path, follow=True, raises=True): return [path]
  return list(_walk_files(path, recurse=recurse, suffix=suffix, on_error=on_error, is_root=True))


def _walk_files(dir_path:str, recurse:bool, suffix:str, on_error:OnDirError|None, is_root:bool) -> Iterator[str]:
  'Yield matching file paths in lexical order, with the contents of each subdirectory in the position of its name.'
  try: entries = scan_dir(dir_path, hidden=True)
  except OSError as e:
    if is_root or on_error is None: raise
    on_error(dir_path, e)
    return
  for entry in entries:
    path = norm_path(path_join(dir_path, entry.name)) # Normalization drops a leading "./".
    if entry.is_dir(follow_symlinks=False):
      if recurse:
        yield from _walk_files(path, recurse=recurse, suffix=suffix, on_error=on_error, is_root=False)
    elif entry.is_dir(): # Symlink to a directory; never descend, to avoid cycles.
      continue
    elif entry.name.endswith(suffix):
      yield path
