import cProfile, pstats

from src.test import test_util, test_intervals, test_notes, test_chords
from src.test import test_instruments, test_frettings, test_audio

from src import util

util.log.verbose = False

PROFILE_EACH = False

modules_to_test = [
                  test_util,
                  test_intervals,
                  test_notes,
                  test_chords,
                  test_instruments,
                  test_frettings,
                  test_audio,
                  ]

def profile(func):
    def wrapper():
        if PROFILE_EACH:
            profiler = cProfile.Profile()
            profiler.enable()
            func()
            profiler.disable()
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(6)
        else:
            func()
    return wrapper

def run_all_tests():
    for module in modules_to_test:

        @profile
        def module_test():
            print(f'Testing {module.__name__}')
            module.unit_test()
            print(f' + {module.__name__} test passed + ')

        module_test()
    print(f'+++ All tests passed +++')

if __name__ == '__main__':
    if PROFILE_EACH:
        run_all_tests()
    else:
        # profile them all together:
        profiler = cProfile.Profile()
        profiler.enable()

        run_all_tests()

        profiler.disable()
        stats = pstats.Stats(profiler).sort_stats('tottime')
        print('='*20 + '\nPROFILING:\n' + '='*20)
        stats.print_stats(20)
