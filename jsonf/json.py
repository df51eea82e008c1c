# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
JSON reformatting.
The input is validated with the standard `json` parser, but the output is produced by rescanning the original text,
so that key order, number spellings and string escapes are preserved exactly.
'''

import json as _json
from json.decoder import JSONDecodeError
from typing import Any, Iterator, List, Tuple

from pithy.path import Pathish

from .exceptions import ParseError
from .indent import IndentSpec


json_ws = ' \t\n\r' # The only whitespace characters permitted by JSON.

max_depth = 10000 # Nesting limit for arrays and objects.


def validate_json(text:str) -> None:
  '''
  Parse `text` and discard the result; raise ParseError if it is not a single valid JSON value.
  Numbers are not converted, so arbitrarily large values are accepted.
  '''
  if not text or text.isspace(): raise ParseError('empty document')
  if nesting_depth(text) > max_depth: raise ParseError(f'exceeded max depth of {max_depth}')
  try: _json.loads(text, parse_int=str, parse_float=str, parse_constant=_reject_constant)
  except JSONDecodeError as e:
    raise ParseError(f'{e.msg}: line {e.lineno} column {e.colno} (char {e.pos})') from e
  except RecursionError as e: # The standard parser recurses once per nesting level.
    raise ParseError('nesting too deep') from e


def nesting_depth(text:str) -> int:
  'Return the maximum bracket nesting depth of `text`, ignoring brackets inside strings.'
  depth = 0
  max_seen = 0
  for c, in_str in _scan_significant(text):
    if in_str: continue
    if c in '{[':
      depth += 1
      if depth > max_seen: max_seen = depth
    elif c in '}]':
      depth -= 1
  return max_seen


def _reject_constant(name:str) -> Any:
  # The standard parser accepts these JavaScript constants by default.
  raise ParseError(f'invalid value: {name}')


def compact_json(text:str) -> str:
  'Remove all insignificant whitespace from `text`, which must be valid JSON.'
  return ''.join(c for c, _ in _scan_significant(text))


def indent_json(text:str, indent:str) -> str:
  '''
  Reformat `text`, which must be valid JSON, with each array element and object member on its own line,
  prefixed by `indent` repeated once per nesting level. Empty arrays and objects are rendered as `[]` and `{}`.
  No trailing newline is added.
  '''
  parts:List[str] = []
  depth = 0
  need_indent = False # Set after an open bracket; the newline is deferred until the container is known to be non-empty.
  for c, in_str in _scan_significant(text):
    if need_indent and c not in ']}':
      need_indent = False
      depth += 1
      parts.append('\n' + indent * depth)

    if in_str:
      parts.append(c)
    elif c in '{[':
      need_indent = True
      parts.append(c)
    elif c == ',':
      parts.append(',\n' + indent * depth)
    elif c == ':':
      parts.append(': ')
    elif c in '}]':
      if need_indent: # Empty container.
        need_indent = False
      else:
        depth -= 1
        parts.append('\n' + indent * depth)
      parts.append(c)
    else:
      parts.append(c)
  return ''.join(parts)


def _scan_significant(text:str) -> Iterator[Tuple[str, bool]]:
  '''
  Yield (char, in_str) pairs for every character of `text` except whitespace outside of strings.
  `in_str` is true for the contents of a string, excluding its opening quote but including its closing quote.
  '''
  in_str = False
  in_esc = False
  for c in text:
    if in_str:
      if in_esc:
        in_esc = False
      elif c == '\\':
        in_esc = True
      elif c == '"':
        in_str = False
      yield c, True
    elif c in json_ws:
      continue
    else:
      if c == '"': in_str = True
      yield c, False


def format_json(text:str, spec:IndentSpec) -> str:
  '''
  Validate and reformat `text` according to `spec`.
  Compact output has no trailing newline; indented output ends with a single newline.
  '''
  text = text.strip(json_ws)
  validate_json(text)
  if spec.compact: return compact_json(text)
  return indent_json(text, spec.indent) + '\n'


def format_json_bytes(data:bytes, spec:IndentSpec) -> str:
  'Decode `data` as UTF-8 and reformat it according to `spec`.'
  try: text = data.decode('utf-8')
  except UnicodeDecodeError as e:
    raise ParseError(f'invalid UTF-8: {e.reason} at byte {e.start}') from e
  return format_json(text, spec)


def format_json_file(path:Pathish, spec:IndentSpec) -> str:
  'Read the entire file at `path` and reformat it according to `spec`.'
  with open(path, 'rb') as f:
    data = f.read()
  return format_json_bytes(data, spec)
