############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### a note or chord named with an explicit accidental (e.g. 'Bb2' or 'F#m')
### keeps its own spelling, but in the simple case of "OctaveNote('C4') + 1",
### or of an instrument string fretted up into a black note, this setting
### determines the result.
DEFAULT_SHARPS = True

### PREFER_UNICODE_ACCIDENTALS controls whether the default behaviour
### when printing sharp and flat signs are the normal keyboard-typable
### characters '#' and 'b' (if False)
### or the unicode characters '♯' and '♭' (if True)
PREFER_UNICODE_ACCIDENTALS = True
### both are treated as valid input options in either case,
### this only affects what the program outputs to screen


# fretwork objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = {  'Note': '♩',
       'OctaveNote': '♪',
            'Chord': '♬ ',
          }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = { 'Interval': ['‹', '›'],
         'IntervalList': ['𝄁', ' 𝄁'],
             'NoteList': ['𝄃', ' 𝄂'],
         'FretPosition': ['(', ')'],
             'Fretting': ['╟', '╢'],
    'FrettedInstrument': ['〚', ' 〛'],
            }


############# fretting settings:

### DEFAULT_HIGHEST_FRET is the (inclusive) fret bound used when searching
### for frettings of a chord, unless one is given explicitly.
### the search is exponential in the number of candidate frets per string,
### so raising this much beyond the default (or searching instruments with
### many strings) makes the search dramatically slower.
DEFAULT_HIGHEST_FRET = 4

### INVERSION_DEGREES is the reference sequence of chord degrees used to
### classify the inversion of a fretting: a fretting whose first position
### sounds degree 1 is in root position (index 0), degree 3 is first
### inversion (index 1), and so on.
INVERSION_DEGREES = (1, 3, 5, 7, 9)

### fret strings are written one character per instrument string,
### with this character for strings that are not sounded:
MUTED_STRING_CHAR = 'x'
### and a single digit for everything else, so frets above this one
### cannot be written as a fret string:
MAX_FRET_STRING_FRET = 9

### DEFAULT_CHORD_OCTAVE is the octave that chord roots are placed in
### when a Chord is initialised by name, like Chord('Am')
DEFAULT_CHORD_OCTAVE = 4


############# tuning and audio settings:

### A4_PITCH is the reference pitch in Hz that all other note pitches are
### calculated from, under twelve-tone equal temperament
A4_PITCH = 440.0

### SAMPLE_RATE is the number of audio samples per second used by
### the synthesis and playback functions in audio.py
SAMPLE_RATE = 44100


############# debug settings:

### VERBOSE sets whether the util.log object prints its messages by default.
### it can also be switched on at runtime with: util.log.verbose = True
VERBOSE = False
