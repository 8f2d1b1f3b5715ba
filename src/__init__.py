from .intervals import Interval, IntervalList
from .notes import Note, OctaveNote, Pitch, NoteList
from .chords import Chord
from .instruments import FrettedInstrument, Guitar, get_instrument, fretted_instruments
from .instruments import guitar, standard, dadgad, drop_d, ukulele, baritone_ukulele, banjo, mandolin, bass
from .frettings import FretPosition, Fretting, chord_frets, chord_frettings, sort_frettings, best_fretting_for
from .util import log
