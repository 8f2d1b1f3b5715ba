### this demo script just imports the entire fretwork namespace for easy access.
### it's intended to be used interactively without the need to install the package properly, e.g.
### e.g.:  $ ipython -i demo.py

import ipdb, time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, parsing, conversion, _settings
from src.intervals import *
from src.notes import *
from src.chords import *
from src.instruments import *
from src.frettings import *
from src.audio import *

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'fretwork library initialised in {init_time:.2} seconds')

def show_frettings(chord_name, instrument, num=3):
    chord = Chord(chord_name)
    frettings = chord_frettings(chord, instrument)
    print(f'{chord} on {instrument}: {len(frettings)} frettings, best {num}:')
    for f in frettings[:num]:
        print(f'    {f.fret_string}  inversion {f.inversion_index}, {f.sounded_string_count} strings, {f.open_string_count} open')

if __name__ == '__main__':
    for name in ['C', 'G', 'Am', 'E7', 'Dsus4']:
        show_frettings(name, guitar)
    for name in ['C', 'F', 'G7']:
        show_frettings(name, ukulele)
    # fret strings read from the first string of the tuning, i.e. the low E on a guitar:
    open_c = Fretting.from_fret_string('x32010', guitar, Chord('C'))
    print(f'{open_c!r} sounds {open_c.notes}, inversion {open_c.inversion_index}')
