# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
jsonf is a simple JSON formatter: it indents or compacts JSON files, optionally rewriting them in place.
'''
