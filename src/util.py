from . import _settings

import time
import inspect

global_init_time = time.time()

class Log:
    """prints timestamped messages tagged with the calling function,
    but only while switched on, e.g. with: log.verbose = True"""
    def __init__(self, verbose=_settings.VERBOSE):
        self.verbose = verbose

    def __call__(self, msg):
        if self.verbose:
            caller_name = inspect.stack(0)[1].function
            wall_time = time.time() - global_init_time
            print(f'[{wall_time:.06f}]({caller_name}) {msg}')

log = Log()

# lookup table helpers, for aliases and tunings:
def reverse_dict(dct):
    """maps every value of a one-to-one dict back onto its key.
    list values are made into tuples so that they can be keys"""
    return {(tuple(v) if isinstance(v, list) else v): k for k, v in dct.items()}

def unpack_and_reverse_dict(dct, include_keys=False):
    """accepts a dict of lists (like a dict of aliases),
    and returns a dict mapping every item of those lists to the key it was listed under.
    if include_keys, also maps each key onto itself"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            raise TypeError(f'unpack_and_reverse_dict expects dict values to be tuples or lists, but got: {type(v_list)}')
        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            rev_dct[k] = k
    return rev_dct

def check_all(iterable, check, comparison):
    """True if every item in an iterable passes a check against 'comparison',
    where 'check' is one of: 'isinstance', '==', or 'in'"""
    checks = {'isinstance': isinstance,
              '==': lambda x, y: x == y,
              'in': lambda x, y: x in y}
    if check not in checks:
        raise ValueError(f"invalid check arg ({check}) to check_all, must be one of: {', '.join(checks)}")
    return all([checks[check](item, comparison) for item in iterable])

def stable_sort(lst, key, descending=False):
    """sorts a list in place by some key function, keeping the existing
    relative order of items whose keys are equal.
    successive calls therefore act as a chain of tie-breakers,
    where the last call made decides the primary ordering"""
    lst.sort(key=key, reverse=descending)
    return lst
