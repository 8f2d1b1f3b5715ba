from .notes import Note, OctaveNote, NoteList
from .util import log, reverse_dict
from . import parsing, _settings


class String(OctaveNote):
    """a String is just an OctaveNote that can be called with an offset ('fret')
    to 'play' it higher by that many semitones"""
    def __call__(self, fret):
        return self + fret

tuning_note_names = {   # names/aliases for common tunings, listed from lowest string to highest:
          # guitar:
        'standard': ( 'E2',  'A2',  'D3',  'G3',  'B3',  'E4' ),
       'half-step': ( 'Eb2', 'Ab2', 'Db3', 'Gb3', 'Bb3', 'Eb4'), # the GnR tuning
           'dropD': ( 'D2',  'A2',  'D3',  'G3',  'B3',  'E4' ),
           'dropC': ( 'C2',  'G2',  'C3',  'F3',  'A3',  'D4' ),
           'dropB': ( 'B1',  'Gb2', 'B2',  'E3',  'Ab3', 'Db4'),
           'openE': ( 'E2',  'B2',  'E3',  'G#3', 'B3',  'E4' ),
          'celtic': ( 'D2',  'A2',  'D3',  'G3',  'A3',  'D4' ), # openDsus4, better known as DADGAD
           'openD': ( 'D2',  'A2',  'D3',  'F#3', 'A3',  'D4' ),
           'openC': ( 'C2',  'G2',  'C3',  'G3',  'C4',  'E4' ),
           'openG': ( 'D2',  'G2',  'D3',  'G3',  'B3',  'D4' ),
          # everything else:
         'ukulele': ( 'G4',  'C4',  'E4',  'A4' ),  # re-entrant: the G string is above the C
'baritone ukulele': ( 'D3',  'G3',  'B3',  'E4' ),
           'banjo': ( 'G4',  'D3',  'G3',  'B3',  'D4' ), # open G, with the short 5th string listed first
        'mandolin': ( 'G3',  'D4',  'A4',  'E5' ),
            'bass': ( 'E1',  'A1',  'D2',  'G2' ),
               }

tuning_aliases = reverse_dict(tuning_note_names)


def force_ascending(note_names, start_octave=2):
    """accepts a sequence of bare note names like ['E', 'A', 'D', ...],
    and places each in the lowest octave that keeps the series strictly ascending,
    starting from start_octave"""
    octave_notes = []
    for name in note_names:
        if isinstance(name, Note):
            name = name.chroma
        note = Note(name).in_octave(start_octave)
        if len(octave_notes) > 0:
            while note.value <= octave_notes[-1].value:
                note = note + 12
        octave_notes.append(note)
    return octave_notes


class FrettedInstrument:
    """an instrument with some number of strings, each tuned to some OctaveNote,
    that sound higher by one semitone for every fret they are stopped at.

    strings are numbered in the order their tuning lists them, counting up from 0,
    so a guitar in standard tuning has its low E on string 0 and its high E on string 5."""

    def __init__(self, name, tuning=None, capo=0):
        """'name' describes the instrument, like 'guitar' or 'ukulele'.

        'tuning' can be one of:
            a tuning alias: standard, dropD, openE, ukulele, etc.
            a string of octave notes like: 'E2 A2 D3 G3 B3 E4'
            a sequence of OctaveNotes, or of their names
            or None, in which case 'name' itself must be a tuning alias.

        'capo' is the fret a capo is placed on. fret numbers are always counted
        from the capo, so fret 0 on a capo'd string sounds the capo fret."""

        if tuning is None:
            tuning = name

        if isinstance(tuning, str):
            if tuning in tuning_note_names:
                # interpret an alias, like 'standard':
                tuning_names = tuning_note_names[tuning]
            else:
                # interpret a string that separates into octave note names, like 'D2 A2 D3 G3 A3 D4':
                tuning_names = parsing.parse_out_note_names(tuning)
        elif isinstance(tuning, (list, tuple)):
            tuning_names = tuning
        else:
            raise TypeError(f'Instrument tuning must be an alias, a string of note names, or a list of notes, not {type(tuning)}')

        if len(tuning_names) == 0:
            raise ValueError(f'Instrument {name} must have at least one string')
        if not (isinstance(capo, int) and capo >= 0):
            raise ValueError(f'Capo must be placed on a non-negative integer fret, not: {capo}')

        if not all([isinstance(s, OctaveNote) or parsing.is_valid_octavenote_name(s) for s in tuning_names]):
            # bare note names like 'EADGBE': make into a strictly ascending series of OctaveNotes
            tuning_names = force_ascending(tuning_names)

        self.name = name
        self.capo = capo
        # what each string is tuned to, before capo:
        tuned_notes = [OctaveNote(s) for s in tuning_names]
        self.tuned_strings = [String(value=n.value, prefer_sharps=n.prefer_sharps) for n in tuned_notes]
        # string describing the tuning, such as EADGBE or GCEA
        self.tuning = ''.join([s.chroma for s in self.tuned_strings])

    # open strings are relative to capo instead of to the nut:
    @property
    def open_strings(self):
        return [String(value=(s + self.capo).value, prefer_sharps=s.prefer_sharps) for s in self.tuned_strings]

    @property
    def string_pitches(self):
        """the pitch of each string at fret 0, indexed in parallel with string_indices"""
        return self.open_strings

    @property
    def string_count(self):
        return len(self.tuned_strings)

    @property
    def string_indices(self):
        return list(range(self.string_count))

    def pitch_at(self, string_index, fret_number):
        """returns the OctaveNote sounded by stopping a string at a fret"""
        if not (0 <= string_index < self.string_count):
            raise IndexError(f'{self} has no string with index {string_index}')
        if fret_number < 0:
            raise ValueError(f'Fret number must be non-negative, but got: {fret_number}')
        return self.open_strings[string_index](fret_number)

    def fret(self, frets):
        """simulates plucking each string according to the listed frets (one per string,
        in tuning order, with None for unplayed strings), and returns the resulting notes as a NoteList."""
        if len(frets) != self.string_count:
            raise ValueError(f'Expected {self.string_count} frets for {self}, but got {len(frets)}: {frets}')
        string_notes = []
        for s, f in zip(self.string_indices, frets):
            if isinstance(f, int):
                string_notes.append(self.pitch_at(s, f))
            elif f is None:
                # don't sound this string
                pass
            else:
                raise ValueError(f'Expected frets to be ints or None, but received {type(f)} for string {s}')
        return NoteList(string_notes, strip_octave=False)

    def __getitem__(self, frets):
        return self.fret(frets)

    def __contains__(self, item):
        """an instrument 'contains' a note if that note is in its open strings"""
        if isinstance(item, OctaveNote):
            return item.value in [s.value for s in self.open_strings]
        elif isinstance(item, (Note, str)):
            return Note(item).position in [s.position for s in self.open_strings]
        else:
            raise TypeError(f'Instrument membership is only defined for Notes and OctaveNotes, not {type(item)}')

    def with_capo(self, capo):
        """returns a copy of this instrument with a capo on some fret"""
        return FrettedInstrument(self.name, tuning=self.tuned_strings, capo=capo)

    #### display methods:
    @property
    def tuning_name(self):
        """uses alias like 'standard' or 'dropD' if defined, otherwise spells out the tuning"""
        names = tuple([s.name for s in self.tuned_strings])
        if names in tuning_aliases:
            return tuning_aliases[names]
        else:
            return self.tuning

    def __str__(self):
        lb, rb = self._brackets
        if self.capo == 0:
            return f'{lb}{self.name.capitalize()}: {self.tuning}{rb}'
        else:
            capo_str = ''.join([string.chroma for string in self.open_strings])
            return f'{lb}{self.name.capitalize()}: {self.tuning}+{self.capo}: {capo_str}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['FrettedInstrument']


def Guitar(tuning='standard', capo=0):
    """a six-string guitar in some tuning, standard by default"""
    return FrettedInstrument('guitar', tuning=tuning, capo=capo)

# predefined instruments:
guitar = standard = Guitar()
dadgad = Guitar('celtic')
drop_d = Guitar('dropD')
ukulele = FrettedInstrument('ukulele')
baritone_ukulele = FrettedInstrument('baritone ukulele')
banjo = FrettedInstrument('banjo')
mandolin = FrettedInstrument('mandolin')
bass = FrettedInstrument('bass')

fretted_instruments = {inst.name: inst for inst in [guitar, ukulele, baritone_ukulele, banjo, mandolin, bass]}

def get_instrument(name):
    """returns a predefined instrument by name, like 'guitar' or 'ukulele'"""
    if name not in fretted_instruments:
        raise ValueError(f'Unknown instrument: {name} (must be one of: {", ".join(fretted_instruments.keys())})')
    log(f'Fetching instrument: {name}')
    return fretted_instruments[name]
