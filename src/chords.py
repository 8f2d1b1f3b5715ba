from .intervals import Interval, IntervalList
from .notes import Note, OctaveNote, NoteList
from .util import log, check_all, unpack_and_reverse_dict
from .config.def_chords import chord_types, chord_type_aliases
from . import parsing, _settings

from functools import cached_property


def parse_factor(factor):
    """reads a chord factor like '3' or 'b7' or '#5',
    and returns the Interval it denotes above the chord's root"""
    acc, degree = factor[:-1], factor[-1:]
    # degrees can be two digits long, like 11 or 13:
    while len(acc) > 0 and acc[-1].isdigit():
        acc, degree = acc[:-1], acc[-1] + degree
    if not degree.isdigit() or acc not in parsing.accidental_offsets:
        raise ValueError(f'Invalid chord factor: {factor}')
    return Interval.from_degree(int(degree), offset=parsing.accidental_value(acc))

# intervals from root of every chord type:
chord_type_intervals = {suffix: IntervalList([parse_factor(f) for f in factors.split(' ')])
                            for suffix, factors in chord_types.items()}
# alias lookup, every alias maps onto its canonical suffix:
chord_suffixes = unpack_and_reverse_dict(chord_type_aliases, include_keys=True)
chord_suffixes.update({suffix: suffix for suffix in chord_types.keys()})
# and intervals back to the suffix that names them:
interval_chord_types = {tuple(ivs.values): suffix for suffix, ivs in chord_type_intervals.items()}


class Chord:
    """a Chord built on a specific root pitch, such as C4 major.
    a chord exposes its root (an OctaveNote), its intervals from that root (one per chord degree),
    and the pitches that result from stacking those intervals onto the root."""

    def __init__(self, name=None, root=None, intervals=None, notes=None, prefer_sharps=None):
        """initialised in one of three ways:

        1. from 'name' arg, as a proper Chord name (like "Csus2" or "Ebm7"),
            in which case we extract the root note from the string, and look up
            the remaining suffix in the chord types defined in config.def_chords.
            the root is placed in the default octave (see _settings) unless the name
            gives one explicitly, like "E2m".

        2. from 'root' arg, as a Note, OctaveNote, or note name,
            in combination with 'intervals' (a list of Intervals or ints from the root),
            or with 'name' as a chord suffix like 'm7'. major by default.

        3. from 'notes' arg, as a list of ascending OctaveNotes (or their names),
            in which case the first is the root and the others become intervals from it.

        a chord tone doubled in another octave (like the C4 of C3 E3 G3 C4) is kept
        in the voicing, but is not a chord degree of its own: see voiced_intervals.
        """
        if isinstance(name, Chord):
            # accept re-casting from another chord:
            root, intervals, name = name.root, name.voiced_intervals, None

        if notes is not None:
            assert name is None and root is None and intervals is None, "Chord init from notes cannot also take name, root, or intervals args"
            note_list = [n if isinstance(n, OctaveNote) else OctaveNote(n) for n in notes]
            if len(note_list) == 0:
                raise ValueError('Chord init from notes requires at least one note')
            root = note_list[0]
            intervals = [(n - root).value for n in note_list]

        if root is None:
            if not isinstance(name, str):
                raise TypeError(f'Chord name must be a str, but got: {type(name)}')
            root_name, suffix = parsing.note_split(name)
            # an explicit octave may follow the root name:
            octave_digits = ''
            while len(suffix) > 0 and suffix[0].isdigit() and not (suffix in chord_suffixes):
                octave_digits, suffix = octave_digits + suffix[0], suffix[1:]
            if len(octave_digits) > 0:
                root = OctaveNote(root_name + octave_digits)
            else:
                root = Note(root_name).in_octave(_settings.DEFAULT_CHORD_OCTAVE)
            if prefer_sharps is None and parsing.contains_sharp(root_name):
                prefer_sharps = True
            elif prefer_sharps is None and parsing.contains_flat(root_name):
                prefer_sharps = False
        else:
            root = self._parse_root(root)
            suffix = name

        if intervals is None:
            suffix = '' if suffix is None else suffix
            if suffix not in chord_suffixes:
                raise ValueError(f'Unknown chord type: {suffix!r} (in chord name: {name})')
            intervals = chord_type_intervals[chord_suffixes[suffix]]
        else:
            assert suffix is None, "Chord init cannot take both a chord suffix and explicit intervals"
            if not check_all(intervals, 'isinstance', (int, Interval)):
                raise TypeError(f'Chord intervals must be Intervals or ints, but got: {intervals}')

        if prefer_sharps is not None:
            root = OctaveNote(value=root.value, prefer_sharps=prefer_sharps)

        if len(intervals) == 0:
            raise ValueError('A Chord must have at least one interval (its root)')

        self.root = root
        self.prefer_sharps = root.prefer_sharps
        # the intervals as given, which may double a chord tone in another octave:
        self.voiced_intervals = IntervalList(intervals)
        # and one interval per chord degree:
        self.intervals = self.voiced_intervals.unique(by_pitch_class=True)
        log(f'Initialised chord on root {self.root} with intervals {self.intervals}')

    @staticmethod
    def _parse_root(root):
        if isinstance(root, OctaveNote):
            return root
        elif isinstance(root, Note):
            return root.in_octave(_settings.DEFAULT_CHORD_OCTAVE)
        elif isinstance(root, int):
            return OctaveNote(value=root)
        elif isinstance(root, str):
            if parsing.is_valid_note_name(root):
                return Note(root).in_octave(_settings.DEFAULT_CHORD_OCTAVE)
            return OctaveNote(root)
        else:
            raise TypeError(f'Chord root must be a Note, OctaveNote, int or note name, not {type(root)}')

    @cached_property
    def pitches(self):
        """the OctaveNotes of this chord, stacked on its root, octave doublings included"""
        return [self.root + iv for iv in self.voiced_intervals]

    @cached_property
    def notes(self):
        """the pitch classes of this chord"""
        return NoteList(self.pitches).unique()

    @property
    def pitch_classes(self):
        return set([p.semitones % 12 for p in self.pitches])

    @property
    def suffix(self):
        """the chord-type part of this chord's name, like 'm7',
        or '?' if these intervals are not a registered chord type"""
        flattened = tuple(self.intervals.values)
        if flattened in interval_chord_types:
            return interval_chord_types[flattened]
        else:
            return '?'

    @property
    def name(self):
        return f'{self.root.chroma}{self.suffix}'

    def __len__(self):
        return len(self.intervals)

    def __contains__(self, item):
        """a chord contains a note (or pitch) if its pitch class is among this chord's"""
        if isinstance(item, str):
            item = Note(item) if parsing.is_valid_note_name(item) else OctaveNote(item)
        if isinstance(item, Note):
            return item.position in self.pitch_classes
        elif isinstance(item, int):
            return (item % 12) in self.pitch_classes
        else:
            raise TypeError(f'Chord membership is only defined for Notes, OctaveNotes, and ints, not {type(item)}')

    def __eq__(self, other):
        if not isinstance(other, Chord):
            return False
        return (self.root.value == other.root.value) and (self.intervals.values == other.intervals.values)

    def __hash__(self):
        return hash((self.root.value, tuple(self.intervals.values)))

    def __str__(self):
        return f'{self._marker}{self.name} {self.notes}'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['Chord']
