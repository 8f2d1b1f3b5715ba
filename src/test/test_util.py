from ..util import log, reverse_dict, unpack_and_reverse_dict, check_all, stable_sort
from .testing_tools import compare

from contextlib import redirect_stdout
import io

def test_dicts():
    compare(reverse_dict({'a': 1, 'b': [2, 3]}), {1: 'a', (2, 3): 'b'})
    aliases = {'m': ['min', 'minor'], '': ['maj']}
    compare(unpack_and_reverse_dict(aliases), {'min': 'm', 'minor': 'm', 'maj': ''})
    compare(unpack_and_reverse_dict(aliases, include_keys=True)['m'], 'm')

def test_checks():
    compare(check_all([1, 2, 3], 'isinstance', int), True)
    compare(check_all([1, 2, 'x'], 'isinstance', int), False)
    compare(check_all([1, 1], '==', 1), True)
    compare(check_all(['a', 'b'], 'in', 'abc'), True)

def test_stable_sort():
    # later sorts decide the primary order, earlier sorts break its ties:
    items = [('a', 1, 0), ('b', 0, 1), ('c', 1, 1), ('d', 0, 0)]
    stable_sort(items, key=lambda x: x[2], descending=True)
    stable_sort(items, key=lambda x: x[1])
    compare([x[0] for x in items], ['b', 'd', 'c', 'a'])

def test_log():
    out = io.StringIO()
    with redirect_stdout(out):
        log('not shown')
        log.verbose = True
        try:
            log('shown')
        finally:
            log.verbose = False
    out = out.getvalue()
    compare('not shown' in out, False)
    compare('(test_log) shown' in out, True)


def unit_test():
    test_dicts()
    test_checks()
    test_stable_sort()
    test_log()

if __name__ == '__main__':
    unit_test()
