# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os.path import abspath, dirname

from pithy.path import path_join

from jsonf.exceptions import ParseError
from jsonf.indent import compact_spec, IndentSpec
from jsonf.json import (compact_json, format_json, format_json_bytes, format_json_file, indent_json, max_depth, nesting_depth,
  validate_json)
from utest import utest, utest_exc


fixtures = path_join(dirname(dirname(abspath(__file__))), 'fixtures')
icecream = path_join(fixtures, 'icecream.json')

two_spaces = IndentSpec('  ')
tabs = IndentSpec('\t')

exp_spaces = '''\
{
  "icecream": [
    "chocolate",
    "strawberry",
    "vanilla"
  ]
}
'''

exp_tabs = '''\
{
\t"icecream": [
\t\t"chocolate",
\t\t"strawberry",
\t\t"vanilla"
\t]
}
'''

exp_compact = '{"icecream":["chocolate","strawberry","vanilla"]}'


utest(exp_spaces, format_json_file, icecream, two_spaces)
utest(exp_tabs, format_json_file, icecream, tabs)
utest(exp_compact, format_json_file, icecream, compact_spec)

utest(exp_spaces, format_json, exp_compact, two_spaces)
utest(exp_compact, format_json, exp_compact, compact_spec)
utest(exp_compact, format_json, exp_tabs, compact_spec)
utest(exp_compact, format_json, '\n\t ' + exp_compact + ' \r\n', compact_spec)


# Scalars and empty containers.
utest('1\n', format_json, '1', two_spaces)
utest('"a"\n', format_json, ' "a" ', two_spaces)
utest('null', format_json, 'null', compact_spec)
utest('[]\n', format_json, '[ ]', two_spaces)
utest('{}\n', format_json, '{\n}', two_spaces)
utest('{\n  "a": {},\n  "b": []\n}\n', format_json, '{"a":{ }, "b":[\t]}', two_spaces)
utest('[\n  [\n    []\n  ]\n]\n', format_json, '[[[]]]', two_spaces)


# Text is preserved exactly: key order, number spellings, escapes, whitespace inside strings.
utest('{"z":1.50,"a":1E+2,"m":-0}', compact_json, '{ "z" : 1.50 , "a" : 1E+2, "m": -0 }')
utest('["a b", "\\"{[,:]}\\"", "\\\\"]'.replace(', ', ','),
  compact_json, '[ "a b" , "\\"{[,:]}\\"" , "\\\\" ]')
utest('["\\u00e9", "é"]'.replace(', ', ','), compact_json, '["\\u00e9", "é"]')
utest('{\n> "k": "v, w: {x}"\n}', indent_json, '{"k":"v, w: {x}"}', '> ')
utest('{"a":1,"a":2}', compact_json, '{"a": 1, "a": 2}') # Duplicate keys are kept.
utest('[' + '9' * 5000 + ']', format_json, '[ ' + '9' * 5000 + ' ]', compact_spec)


# Round trip at a fixed indent.
def round_trip(text:str, spec:IndentSpec) -> str:
  return format_json(format_json(format_json(text, spec), compact_spec), spec)

for text in [exp_compact, '{"a":[1,{"b":null}],"c":{"d":[true,false]},"e":"x"}', '[]', '0']:
  utest(format_json(text, two_spaces), round_trip, text, two_spaces)
  utest(format_json(text, tabs), round_trip, text, tabs)


# Invalid input.
utest_exc(ParseError, validate_json, '')
utest_exc(ParseError('empty document'), format_json, ' \n ', two_spaces)
utest_exc(ParseError, format_json, '{"a":1,}', two_spaces)
utest_exc(ParseError, format_json, '{"a" 1}', compact_spec)
utest_exc(ParseError, format_json, '[1] [2]', compact_spec)
utest_exc(ParseError, format_json, "{'a': 1}", compact_spec)
utest_exc(ParseError('invalid value: NaN'), format_json, '[NaN]', compact_spec)
utest_exc(ParseError('invalid value: -Infinity'), format_json, '[-Infinity]', two_spaces)
utest_exc(ParseError('Expecting value: line 1 column 2 (char 1)'), validate_json, '[')
utest_exc(ParseError, format_json_bytes, b'["\xff"]', compact_spec)
utest('["é"]', format_json_bytes, '["é"]'.encode(), compact_spec)
utest_exc(FileNotFoundError, format_json_file, path_join(fixtures, 'missing.json'), compact_spec)
utest_exc(ParseError, format_json_file, path_join(fixtures, 'notes.txt'), compact_spec)

# Nesting depth.
utest(0, nesting_depth, '"[{"')
utest(3, nesting_depth, '[{"a": ["[[[[", {}]}]')
utest(3, nesting_depth, '[[[]], [[["\\"["]]]]')
utest('[' * 500 + ']' * 500, format_json, '[' * 500 + ']' * 500, compact_spec)
utest_exc(ParseError(f'exceeded max depth of {max_depth}'), validate_json, '[' * (max_depth + 1) + ']' * (max_depth + 1))
utest_exc(ParseError, format_json, '{"a":' * 50000 + '1' + '}' * 50000, two_spaces)
