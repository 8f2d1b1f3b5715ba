#### string parsing functions
from collections import defaultdict
from .util import unpack_and_reverse_dict
from . import _settings

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮', 'N'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

def accidental_value(acc):
    return accidental_offsets[acc]

if _settings.PREFER_UNICODE_ACCIDENTALS:
    fl = flat = '♭'
    sh = sharp = '♯'
    nat = '♮'
else:
    fl = flat = 'b'
    sh = sharp = '#'
    nat = 'N'

# string checking for accidental unicode characters:
def is_sharp_ish(chars):
    """returns True for sharps and double sharps"""
    return (chars in accidental_offsets) and (accidental_value(chars) >= 1)
def is_flat_ish(chars):
    """returns True for flats and double flats"""
    return (chars in accidental_offsets) and (accidental_value(chars) <= -1)
def contains_sharp(string):
    return any([c in string for c in offset_accidentals[1] + offset_accidentals[2]])
def contains_flat(string):
    # (lowercase 'b' only counts after the first character, since 'B' is a note)
    return any([c in string[1:] for c in offset_accidentals[-1] + offset_accidentals[-2]])


################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# map every spelling of every note name to its position within the octave (where C is 0):
note_positions = dict(natural_positions)
note_names_by_accidental = {c: {} for c in accidental_offsets.keys()} # dict of acc: (dict of position: name of the note in that position by that acc)

# build sharps, flats, double sharps and double flats:
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            acc_note_name = f'{n}{acc}' # e.g C# or D𝄫
            acc_position = (natural_positions[n] + offset) % 12
            note_positions[acc_note_name] = acc_position
            note_names_by_accidental[acc][acc_position] = acc_note_name

# now the preferred name of each note by preference:
preferred_note_names = {}
for preference in fl, sh:
    acc_notes = note_names_by_accidental[preference]
    nat_notes = note_names_by_accidental[''] # all the white notes
    # use natural names for white notes, and the preferred accidental for black notes:
    names = [nat_notes[p] if p in nat_notes else acc_notes[p] for p in range(12)]
    preferred_note_names[preference] = names

natural_note_positions = set(natural_positions.values())


################### interval names:

num_suffixes = defaultdict(lambda: 'th', {1: 'st', 2: 'nd', 3: 'rd'})

degree_names = {1: 'unison',  2: 'second', 3: 'third',
                4: 'fourth', 5: 'fifth',  6: 'sixth', 7: 'seventh',
                8: 'octave', 9: 'ninth',  10: 'tenth',
               11: 'eleventh', 12: 'twelfth', 13: 'thirteenth'}


################### note name parsing functions:

def is_valid_note_name(name: str, case_sensitive=True):
    """returns True if string can be cast to a Note,
    and False if it cannot (in which case it must be something else, like a Chord)"""
    if not isinstance(name, str) or not (0 < len(name) < 4):
        return False
    if not case_sensitive:
        # force first char to upper case and rest to lower, in case we've been
        # given e.g. lowercase 'c' or 'eb', which are valid if not case_sensitive
        name = name[0].upper() + name[1:].lower()
    return name in note_positions


def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the note name found, or False if there is none."""
    if len(name) >= 3 and is_valid_note_name(name[:3]):
        # three-character note (e.g. E## or Gbb)
        return 3
    if len(name) >= 2 and is_valid_note_name(name[:2]):
        # two-character note
        return 2
    elif len(name) >= 1 and is_valid_note_name(name[0]):
        return 1
    else:
        return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first one to three characters
    (like the name of a chord, e.g. F#sus4)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_out_note_names(note_string, graceful_fail=False):
    """for some string of valid note letters, of undetermined length,
    such as e.g.: 'EADGBE' or 'G C E A', parse out the individual note names
    and return them as a list of strings.
    if graceful_fail, returns False upon failure to parse, instead of error."""

    assert isinstance(note_string, str), f'parse_out_note_names expected str input but got: {type(note_string)}'

    # try looking for obvious split chars first before attempting char-wise split:
    for char in '-, ':
        if char in note_string:
            note_list = [n for n in note_string.split(char) if len(n) > 0]
            if len(note_list) >= 2 and all([is_valid_note_name(n) or is_valid_octavenote_name(n) for n in note_list]):
                return note_list

    note_list = []
    rest = note_string
    while len(rest) > 0:
        result = note_split(rest, graceful_fail=True)
        # catch failure:
        if result is False:
            if graceful_fail:
                return False
            else:
                raise ValueError(f'Error while parsing out note names from {note_string}: No valid note names found in {rest} (note names found so far: {note_list})')
        note_name, rest = result
        # pick up an octave number following the note name, if there is one:
        octave_digits = ''
        while len(rest) > 0 and rest[0].isdigit():
            octave_digits += rest[0]
            rest = rest[1:]
        note_list.append(note_name + octave_digits)
    return note_list

def parse_octavenote_name(name, case_sensitive=True):
    """Takes the name of an OctaveNote as a string,
    for example 'C4' or 'A#3' or 'Gb1',
    and extracts the note and octave components."""
    if not isinstance(name, str):
        raise TypeError(f'Expected OctaveNote name to be a str, but got: {type(name)}')
    numbers_str = ''
    for char in reversed(name):
        if char.isdigit():
            numbers_str = char + numbers_str
        else:
            break
    note_name = name[:len(name)-len(numbers_str)]
    # allow negative octaves, like the C-1 at the bottom of the midi range:
    if note_name.endswith('-') and len(numbers_str) > 0:
        note_name, numbers_str = note_name[:-1], '-' + numbers_str

    if len(numbers_str) == 0:
        raise ValueError(f'Could not parse OctaveNote name: {name}, it has no octave number')

    if not case_sensitive:
        note_name = note_name.capitalize()

    if not is_valid_note_name(note_name):
        raise ValueError(f'Could not parse OctaveNote name: {name}, {note_name} is not a valid note name')
    return note_name, int(numbers_str)

def is_valid_octavenote_name(name):
    try:
        parse_octavenote_name(name)
        return True
    except (ValueError, TypeError):
        return False
