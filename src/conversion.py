from .parsing import parse_octavenote_name, note_positions, preferred_note_names, fl, sh
from . import _settings
import math


#### name-value-pitch conversion functions for OctaveNotes
### values follow midi numbering: C4 (middle C) is 60, A4 is 69,
### and so a value modulo 12 is always that note's position above C.

# get octave and position from note value:
def oct_pos(value): # equivalent to div_mod
    value = int(value) # cast from Interval object if needed
    octave, pos = divmod(value, 12)
    return octave - 1, pos

# get note value from octave and position
def oct_pos_to_value(oct, pos):
    value = (12*(oct+1)) + pos
    return value

### name-value conversion:
def value_to_name(value, prefer_sharps=None):
    if prefer_sharps is None:
        prefer_sharps = _settings.DEFAULT_SHARPS
    oct, pos = oct_pos(value)
    name = preferred_note_names[sh if prefer_sharps else fl][pos]
    return f'{name}{oct}'

def name_to_value(name):
    # get pitch class and octave
    note_name, oct = parse_octavenote_name(name)
    # convert pitch class to position within octave:
    pos = note_positions[note_name]
    return oct_pos_to_value(oct, pos)

### pitch-value conversion
def value_to_pitch(value):
    """Given a note value, return the corresponding
    pitch in Hz as a float, under twelve-tone equal temperament."""
    return round(2 ** ((int(value)-69)/12) * _settings.A4_PITCH, 2)

def pitch_to_value(pitch, nearest=True):
    """Given a pitch in Hz, returns the value of the corresponding note.
    If the pitch is not exact, will return the value of the *nearest* note
    instead, unless nearest is False, in which case will return a float of the hypothetical
    real-valued note corresponding to that pitch (rounded to cents)."""
    exact_value = 12 * math.log(pitch/_settings.A4_PITCH, 2) + 69
    if nearest:
        return round(exact_value)
    else:
        return round(exact_value,2)
