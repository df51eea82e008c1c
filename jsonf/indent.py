# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import NamedTuple


compact_marker = 'c'
space_marker = 's'
tab_marker = 't'


class IndentSpec(NamedTuple):
  '''
  The effective indentation mode.
  If `compact` is set, the output is minified and `indent` is ignored;
  otherwise each nesting level is prefixed with the literal `indent` string.
  '''
  indent: str
  compact: bool = False


compact_spec = IndentSpec(indent='', compact=True)


def resolve_indent(token:str) -> IndentSpec:
  '''
  Convert an indentation token string into an IndentSpec.
  The compact marker anywhere in the token forces compaction.
  Otherwise 's' and 't' are replaced by space and tab; all other characters are kept as is.
  '''
  if compact_marker in token: return compact_spec
  return IndentSpec(indent=token.replace(space_marker, ' ').replace(tab_marker, '\t'))
