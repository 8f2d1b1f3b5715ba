### this module contains the fretting engine: given a chord and a fretted instrument,
### it finds every way of stopping the instrument's strings that sounds that chord,
### and ranks them from most to least playable.
### FretPositions are single (string, fret) placements and the pitch they sound.
### Frettings are complete placements across an instrument's strings, muted strings included.

from .intervals import Interval, IntervalList
from .notes import NoteList
from .chords import Chord
from .instruments import FrettedInstrument
from .util import log, stable_sort
from . import _settings

from dataclasses import dataclass, field
import string


@dataclass(frozen=True)
class FretPosition:
    """one fretted note: a string of some instrument, stopped at some fret.
    'semitones' is the absolute pitch that results, which is cached here
    for convenience but is not part of this position's identity:
    positions are equal (and hash equally) if their string and fret are equal."""
    string_index: int
    fret_number: int
    semitones: int = field(compare=False)

    def as_dict(self):
        return {'string': self.string_index, 'fret': self.fret_number, 'semitones': self.semitones}

    def __str__(self):
        return f'{self.string_index}.{self.fret_number}({self.semitones})'


class Fretting:
    """a set of FretPositions, at most one per string, that voice a chord on a fretted instrument.
    strings with no position are muted (not played).

    positions are kept sorted by descending string index, and every derived view of a Fretting
    (its intervals, its inversion, its pitches) follows that order. the exception is the
    string_fret_list and fret_string views, which follow the instrument's own string order.

    Frettings are immutable once made, and compare by identity rather than by content."""

    def __init__(self, instrument, chord, positions):
        if not isinstance(instrument, FrettedInstrument):
            raise TypeError(f'Fretting instrument must be a FrettedInstrument, not {type(instrument)}')
        if not isinstance(chord, Chord):
            raise TypeError(f'Fretting chord must be a Chord, not {type(chord)}')

        positions = sorted(positions, key=lambda pos: pos.string_index, reverse=True)
        assert len(positions) == len(set([pos.string_index for pos in positions])), f'Fretting cannot have more than one position per string, but got: {[str(p) for p in positions]}'

        self._instrument = instrument
        self._chord = chord
        self._positions = tuple(positions)

        # fret sounded on every string of the instrument, in the instrument's order, or None if muted:
        string_frets = {pos.string_index: pos.fret_number for pos in self._positions}
        self._string_fret_list = tuple([string_frets.get(s, None) for s in instrument.string_indices])

    @staticmethod
    def from_fret_string(fret_string, instrument, chord):
        """parses a compact fret string like 'x32010', with one character per instrument string
        (in the instrument's string order, as given by its string_indices), into the corresponding Fretting.
        each character must be a single digit fret number, or 'x' for a muted string."""
        if not isinstance(fret_string, str):
            raise TypeError(f'fret string must be a str, not {type(fret_string)}')
        if len(fret_string) != instrument.string_count:
            raise ValueError(f'fret string wrong length for {instrument}: {fret_string}')

        positions = []
        for char, string_index in zip(fret_string, instrument.string_indices):
            if char == _settings.MUTED_STRING_CHAR:
                continue
            if char not in string.digits:
                raise ValueError(f'Invalid character {char} in fret string {fret_string}')
            fret_number = int(char)
            semitones = instrument.pitch_at(string_index, fret_number).semitones
            positions.append(FretPosition(string_index, fret_number, semitones))

        return Fretting(instrument=instrument, chord=chord, positions=positions)

    @property
    def instrument(self):
        return self._instrument

    @property
    def chord(self):
        return self._chord

    @property
    def positions(self):
        """this fretting's FretPositions, sorted by descending string index"""
        return list(self._positions)

    @property
    def string_fret_list(self):
        """list of the fret sounded on each of the instrument's strings,
        in the instrument's string order, with None for muted strings"""
        return list(self._string_fret_list)

    @property
    def fret_string(self):
        """the compact one-character-per-string form of this fretting, like 'x32010'.
        raises NotImplementedError if any fret is too high to write as one digit"""
        chars = []
        for fret_number in self._string_fret_list:
            if fret_number is None:
                chars.append(_settings.MUTED_STRING_CHAR)
            elif fret_number <= _settings.MAX_FRET_STRING_FRET:
                chars.append(str(fret_number))
            else:
                raise NotImplementedError(f'fret >= {_settings.MAX_FRET_STRING_FRET+1}')
        return ''.join(chars)

    @property
    def intervals(self):
        """the interval from the chord's root to each position, reduced to within an octave"""
        root_semitones = self._chord.root.semitones
        return IntervalList([Interval.from_semitones((pos.semitones - root_semitones) % 12) for pos in self._positions])

    @property
    def inversion_index(self):
        """which chord degree this fretting's first position sounds, as an index into
        the reference degrees 1, 3, 5, 7, 9: so 0 for root position, 1 for first inversion, etc.
        (or -1 if the first position sounds some other degree, like the 4th of a sus4 chord)"""
        if len(self._positions) == 0:
            raise IndexError('Fretting with no sounded strings has no inversion')
        first_degree = self.intervals[0].number
        if first_degree in _settings.INVERSION_DEGREES:
            return _settings.INVERSION_DEGREES.index(first_degree)
        else:
            return -1

    @property
    def open_string_count(self):
        return len([pos for pos in self._positions if pos.fret_number == 0])

    @property
    def sounded_string_count(self):
        return len(self._positions)

    @property
    def pitches(self):
        """the OctaveNotes sounded by this fretting, in position order"""
        return [self._instrument.pitch_at(pos.string_index, pos.fret_number) for pos in self._positions]

    @property
    def notes(self):
        return NoteList(self.pitches)

    @property
    def pitch_classes(self):
        return set([pos.semitones % 12 for pos in self._positions])

    def same_positions(self, other):
        """True if another fretting places exactly the same frets on the same strings"""
        return set(self._positions) == set(other.positions)

    #### audio methods:
    def wave(self, duration=3, delay=0.05, type='KS', **kwargs):
        """synthesises the sound of this fretting, strummed across its strings in position order
        (with 'delay' seconds between strings), as a numpy array.
        'type' is the synthesis method: 'KS' for a plucked string, or 'pure' for a sine tone"""
        from .audio import synth_wave, arrange_melody
        waves = [synth_wave(p.pitch, duration, type=type, **kwargs) for p in self.pitches]
        return arrange_melody(waves, delay=delay)

    def chord_wave(self, duration=3, type='KS', **kwargs):
        """synthesises the sound of this fretting with every string sounding at once, as a numpy array"""
        from .audio import synth_wave, arrange_chord
        if len(self._positions) == 0:
            raise ValueError(f'Cannot synthesise a fretting with no sounded strings: {self}')
        waves = [synth_wave(p.pitch, duration, type=type, **kwargs) for p in self.pitches]
        return arrange_chord(waves, norm=True)

    def play(self, duration=3, **kwargs):
        """plays the fretted notes as audio, summed into a chord"""
        from .audio import play_wave
        play_wave(self.chord_wave(duration=duration, **kwargs))

    def strum(self, duration=3, **kwargs):
        """plays this fretting as audio, arpeggiated close together"""
        from .audio import play_wave
        play_wave(self.wave(duration=duration, delay=0.05, **kwargs))

    def pick(self, pattern=None, duration=3, **kwargs):
        """plays the fretted notes as audio, arpeggiated into a melody.
        accepts optional 'pattern' arg as list of string indices, e.g. [1,4,3,4]
        indicating a picking pattern that changes the order of notes"""
        from .audio import synth_wave, arrange_melody, play_wave
        pitches = {pos.string_index: p for pos, p in zip(self._positions, self.pitches)}
        if pattern is None:
            pattern = [pos.string_index for pos in self._positions]
        for s in pattern:
            if s not in pitches:
                raise ValueError(f'Picking pattern includes string {s}, which is not sounded in {self}')
        waves = [synth_wave(pitches[s].pitch, duration, **kwargs) for s in pattern]
        play_wave(arrange_melody(waves, delay=0.25))

    def __str__(self):
        return self.fret_string

    def __repr__(self):
        lb, rb = self._brackets
        frets = ['x' if f is None else str(f) for f in self._string_fret_list]
        sep = '' if all([len(f) == 1 for f in frets]) else '-'
        return f'{lb}{sep.join(frets)}: {self._chord.name} on {self._instrument.name}{rb}'

    _brackets = _settings.BRACKETS['Fretting']


def chord_frets(chord, instrument, highest_fret=None):
    """returns the set of every FretPosition on an instrument, from the open string up to
    'highest_fret' (inclusive), that sounds one of the chord's pitch classes"""
    if highest_fret is None:
        highest_fret = _settings.DEFAULT_HIGHEST_FRET
    chord_pitch_classes = set([pitch.semitones % 12 for pitch in chord.pitches])

    positions = set()
    for string_index in instrument.string_indices:
        for fret_number in range(0, highest_fret+1):
            semitones = instrument.pitch_at(string_index, fret_number).semitones
            if (semitones % 12) in chord_pitch_classes:
                positions.add(FretPosition(string_index, fret_number, semitones))
    return positions

def partition_frets_by_string(chord, instrument, highest_fret=None):
    """as chord_frets, but returns a dict mapping every string index of the instrument
    to a list of its candidate positions, in ascending fret order"""
    partitions = {string_index: [] for string_index in instrument.string_indices}
    for position in chord_frets(chord, instrument, highest_fret):
        partitions[position.string_index].append(position)
    for string_index, string_positions in partitions.items():
        string_positions.sort(key=lambda pos: pos.fret_number)
        log(f'String {string_index}: {len(string_positions)} candidate frets {[p.fret_number for p in string_positions]}')
    return partitions

def generate_frettings(chord, instrument, highest_fret=None):
    """returns an (unranked) list of every Fretting of a chord on an instrument,
    within the fret bound, that places at most one position on each string
    and sounds at least as many distinct pitch classes as the chord has degrees.

    the search tries, for every string in turn, leaving that string muted and
    then each of its candidate positions. nothing is pruned until a choice has been
    made for every string, so the number of branches grows as the product of
    (candidates + 1) over all strings: large fret bounds or many-stringed
    instruments will be very slow."""
    min_pitch_classes = len(chord.intervals)
    string_frets = partition_frets_by_string(chord, instrument, highest_fret)
    frettings = []

    def collect(unprocessed_string_indices, collected_positions):
        if len(unprocessed_string_indices) == 0:
            pitch_class_count = len(set([pos.semitones % 12 for pos in collected_positions]))
            if pitch_class_count >= min_pitch_classes:
                frettings.append(Fretting(instrument=instrument, chord=chord, positions=collected_positions))
        else:
            string_index = unprocessed_string_indices[0]
            future_string_indices = unprocessed_string_indices[1:]
            # mute this string:
            collect(future_string_indices, collected_positions)
            # or play one of its candidate frets:
            for position in string_frets[string_index]:
                collect(future_string_indices, collected_positions + [position])

    collect(instrument.string_indices, [])
    log(f'Found {len(frettings)} frettings of {chord.name} on {instrument.name} covering {min_pitch_classes} pitch classes')
    return frettings

def sort_frettings(frettings):
    """returns a new list of frettings, ranked from most to least preferable.

    the ranking is three successive stable sorts, so that each pass only
    breaks the ties left by the passes after it. in order of priority:
        root position first (then first inversion, and so on),
        then more sounded strings first,
        then more open strings first."""
    fretting_list = list(frettings)
    # number of open strings:
    stable_sort(fretting_list, key=lambda f: f.open_string_count, descending=True)
    # number of sounded strings:
    stable_sort(fretting_list, key=lambda f: f.sounded_string_count, descending=True)
    # root position:
    stable_sort(fretting_list, key=lambda f: f.inversion_index)
    return fretting_list

def chord_frettings(chord, instrument, highest_fret=None):
    """finds every fretting of a chord on an instrument up to 'highest_fret' (4 by default),
    ranked from most to least preferable. returns an empty list if there are none."""
    if not isinstance(chord, Chord):
        raise TypeError(f'chord_frettings expects a Chord, not {type(chord)}')
    if not isinstance(instrument, FrettedInstrument):
        raise TypeError(f'chord_frettings expects a FrettedInstrument, not {type(instrument)}')
    frettings = generate_frettings(chord, instrument, highest_fret)
    return sort_frettings(frettings)

def best_fretting_for(chord, instrument, highest_fret=None):
    """returns the single most preferable fretting of a chord on an instrument.
    raises ValueError if the chord cannot be fretted at all within the fret bound."""
    frettings = chord_frettings(chord, instrument, highest_fret)
    if len(frettings) == 0:
        bound = _settings.DEFAULT_HIGHEST_FRET if highest_fret is None else highest_fret
        raise ValueError(f'No frettings of {chord.name} found on {instrument} up to fret {bound}')
    return frettings[0]
