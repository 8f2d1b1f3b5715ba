### this module contains the Note, OctaveNote, and NoteList classes.
### Notes are abstract pitch classes in no particular octave, such as the note C.
### OctaveNotes are specific pitches like the keys of a piano, such as C4 (aka middle C),
### and are what an instrument string actually sounds when fretted.
### NoteLists are simply lists of either types of note, with some useful methods.

from .intervals import Interval
from . import parsing, _settings
from . import conversion as conv


class Note:
    """a note/chroma/pitch-class defined in the abstract,
    i.e. not associated with a specific note inside an octave,
    such as: C or D#"""
    def __init__(self, name=None, position=None, prefer_sharps=None):
        """a Note can be initialised in one of two ways:
            1. by passing to 'name' a valid note name, such as C or D# or Ebb
            2. by passing to 'position' an integer between 0 and 11 (inclusive),
                denoting a semitone offset from C.
                i.e. position 0 is C, 1 is C#, 2 is D... 11 is B

        'prefer_sharps':
            if True, this note will be displayed with sharps where applicable.
            if False, will be displayed with flats where applicable.
            if None (default), will infer sharp/flat preference from 'name' arg,
                or else fall back on global default (defined in _settings module)
        """
        if isinstance(name, Note):
            # accept re-casting: just take the input note's name
            name, prefer_sharps = name.chroma, name.prefer_sharps
        elif isinstance(name, int):
            # we've been passed a position int instead of a name,
            # which is fine, silently correct:
            position = name
            name = None

        assert ((name is not None) + (position is not None) == 1), "Argument to Note init must include exactly one of: name or position"

        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise Note object')
            if not parsing.is_valid_note_name(name):
                raise ValueError(f'Invalid note name: {name}')
            if prefer_sharps is None:
                # if no preference is set then we infer from the name argument supplied
                if parsing.is_sharp_ish(name[1:]):
                    prefer_sharps = True
                elif parsing.is_flat_ish(name[1:]):
                    prefer_sharps = False
            position = parsing.note_positions[name]

        if prefer_sharps is None:
            prefer_sharps = _settings.DEFAULT_SHARPS # global default

        self.position = position % 12
        self.prefer_sharps = prefer_sharps
        # 'chroma' is the string denoting pitch class: ('C#', 'Db', 'E', etc.)
        self.chroma = preferred_name(self.position, prefer_sharps=prefer_sharps)

    #### magic methods and note constructors:
    def __add__(self, other):
        """addition with an Interval or int is simple transposition"""
        if isinstance(other, (int, Interval)):
            return Note(position=(self.position + int(other)) % 12, prefer_sharps=self.prefer_sharps)
        else:
            raise TypeError(f'Notes can only be added with Intervals or ints, not {type(other)}')

    def __sub__(self, other):
        """if 'other' is an integer, returns a new Note that is shifted down by that many semitones.
        if 'other' is another Note, return the ascending interval distance between them,
        with other as the root."""
        if isinstance(other, (int, Interval)):
            return Note(position=(self.position - int(other)) % 12, prefer_sharps=self.prefer_sharps)
        elif isinstance(other, Note):
            return Interval.from_semitones((self.position - other.position) % 12)
        else:
            raise TypeError(f'Only integers, Intervals, and other Notes can be subtracted from a Note, not {type(other)}')

    def in_octave(self, octave=4):
        """instantiates an OctaveNote object corresponding to this Note played in a specific octave"""
        return OctaveNote(value=conv.oct_pos_to_value(int(octave), self.position), prefer_sharps=self.prefer_sharps)

    ## comparison operators:
    def __eq__(self, other):
        """Enharmonic equality comparison between Notes, returns True if
        they have the same chroma (by comparing Note.position)."""
        if isinstance(other, str) and parsing.is_valid_note_name(other):
            # cast string to Note if possible
            other = Note(other)
        if isinstance(other, Note):
            return self.position == other.position
        elif other is None:
            return False
        else:
            raise TypeError(f'Notes can only be compared to other Notes, but got: {type(other)}')

    def __hash__(self):
        """note hash-equivalence is based on position alone"""
        return hash(f'Note:{self.position}')

    @property
    def name(self):
        return f'{self.chroma}'

    def is_natural(self):
        """True if this is a white note, False otherwise"""
        return self.position in parsing.natural_note_positions

    def __str__(self):
        # e.g. '♩C#'
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    # Note object unicode identifier:
    _marker = _settings.MARKERS['Note']


#### subclass for specific notes at specific pitches
class OctaveNote(Note):
    """a note in a specific octave, rounded to twelve-tone equal temperament, such as C4 or D#2.

    this class inherits from Note, but also has .octave, .value, .semitones and .pitch attrs,
    and its addition/subtraction operators respect octave as well as position.
    """

    def __init__(self, name=None, value=None, prefer_sharps=None):
        """initialises an OctaveNote object from one of the following:
        name: a string denoting a specific note, like 'C#3' or 'Bb2'
        value: an integer denoting the note's midi number, where C4 is 60 and A4 is 69"""
        if isinstance(name, OctaveNote):
            # accept OctaveNote as input, instantiate a new one with the same properties:
            name, value, prefer_sharps = None, name.value, name.prefer_sharps
        elif isinstance(name, int):
            # auto detect initialisation with note value as first arg
            name, value = None, name

        assert ((name is not None) + (value is not None) == 1), "Argument to OctaveNote init must include exactly one of: name or value"

        if name is not None:
            chroma, octave = parsing.parse_octavenote_name(name)
            value = conv.oct_pos_to_value(octave, parsing.note_positions[chroma])
            if prefer_sharps is None:
                if parsing.is_sharp_ish(chroma[1:]):
                    prefer_sharps = True
                elif parsing.is_flat_ish(chroma[1:]):
                    prefer_sharps = False

        if not isinstance(value, int):
            raise TypeError(f'OctaveNote value must be an int, but got: {type(value)}')

        self.value = value
        self.octave, position = conv.oct_pos(value)
        super().__init__(position=position, prefer_sharps=prefer_sharps)

    @property
    def semitones(self):
        """absolute pitch of this note in semitones, i.e. its midi number"""
        return self.value

    @property
    def pitch(self):
        """frequency of this note in Hz"""
        return conv.value_to_pitch(self.value)

    #### operators & magic methods:
    def __add__(self, interval):
        """returns a new OctaveNote that is shifted up by some integer number of semitones."""
        if not isinstance(interval, (int, Interval)):
            raise TypeError(f'Only Intervals/integers can be added to an OctaveNote, not {type(interval)}')
        return OctaveNote(value = self.value + int(interval), prefer_sharps=self.prefer_sharps)

    def __sub__(self, other):
        """if 'other' is an integer or Interval, returns a new OctaveNote that is shifted down by that many semitones.
        if 'other' is another OctaveNote, return the interval distance between them, with other as the root."""
        if isinstance(other, (int, Interval)):
            return OctaveNote(value = self.value - int(other), prefer_sharps=self.prefer_sharps)
        elif isinstance(other, OctaveNote):
            return Interval(self.value - other.value)
        else:
            raise TypeError(f'Only Intervals/integers/OctaveNotes can be subtracted from an OctaveNote, not {type(other)}')

    def __lt__(self, other):
        if not isinstance(other, OctaveNote):
            raise TypeError(f'OctaveNotes can only be ordered against other OctaveNotes, not {type(other)}')
        return self.value < other.value

    def __eq__(self, other):
        """OctaveNotes are equal to other OctaveNotes that share their position and octave."""
        if isinstance(other, OctaveNote):
            return self.value == other.value
        else:
            raise TypeError(f'OctaveNote __eq__ only defined for other OctaveNotes, not: {type(other)}')

    def __hash__(self):
        return hash(f'OctaveNote:{self.value}')

    @property
    def name(self):
        return f'{self.chroma}{self.octave}'

    @property
    def note(self):
        """returns the parent class Note object
        associated with this OctaveNote"""
        return Note(position=self.position, prefer_sharps=self.prefer_sharps)

    def __str__(self):
        """Returns a pretty version of this OctaveNote's name,
        which includes its chroma as well as its octave."""
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    # OctaveNote object unicode identifier:
    _marker = _settings.MARKERS['OctaveNote']

# the pitch of a fretted note is an OctaveNote:
Pitch = OctaveNote


class NoteList(list):
    """List subclass that is instantiated with an iterable of Note-like objects and forces them all to Note type"""
    def __init__(self, *items, strip_octave=True):
        if len(items) == 1 and not isinstance(items[0], (str, Note)):
            # we've been passed a single iterable of notes:
            items = items[0]
        elif len(items) == 1 and isinstance(items[0], str) and not parsing.is_valid_note_name(items[0]):
            # a string of multiple note names, like 'CEG':
            items = parsing.parse_out_note_names(items[0])
        super().__init__([self._cast_note(n, strip_octave) for n in items])

    @staticmethod
    def _cast_note(item, strip_octave):
        if isinstance(item, OctaveNote):
            return item.note if strip_octave else item
        elif isinstance(item, Note):
            return item
        elif isinstance(item, str):
            if parsing.is_valid_note_name(item):
                return Note(item)
            else:
                octavenote = OctaveNote(item)
                return octavenote.note if strip_octave else octavenote
        elif isinstance(item, int):
            return Note(position=item)
        else:
            raise TypeError(f'NoteList items must be Notes, OctaveNotes, or note names, not {type(item)}')

    def unique(self):
        """returns a new NoteList with duplicate (enharmonic) notes removed, preserving order"""
        seen, unique_notes = set(), []
        for n in self:
            if n.position not in seen:
                seen.add(n.position)
                unique_notes.append(n)
        return NoteList(unique_notes, strip_octave=False)

    @property
    def positions(self):
        return [n.position for n in self]

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}' + ', '.join([n.name for n in self]) + f'{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['NoteList']


# get note name string from position in octave:
def preferred_name(pos, prefer_sharps=None):
    """Gets the note name for a specific position according to preferred sharp/flat notation,
    or just the natural note name if a a white note"""
    if prefer_sharps is None:
        prefer_sharps = _settings.DEFAULT_SHARPS
    return parsing.preferred_note_names[parsing.sh if prefer_sharps else parsing.fl][pos % 12]

MiddleC = OctaveNote('C4')
