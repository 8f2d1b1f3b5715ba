### chord types and their names - for example, 'm7' and 'sus4' and 'add9' are defined in this module.
### new chord types (or aliases for existing types) can be freely added by following the examples below,
### where hopefully the template is self-explanatory.

### a chord type is written as a space-separated list of its factors: scale degrees relative to
### the root, each with an optional leading accidental that lowers or raises it from its
### major/perfect form. for example a dominant 7th is '1 3 5 b7': a major triad plus a lowered 7th.
### factors are listed in the order their notes are stacked above the root.

chord_types = {
    '':      '1 3 5',          # major triad
    'm':     '1 b3 5',         # minor triad
    'dim':   '1 b3 b5',        # diminished triad (m3+m3)
    'aug':   '1 3 #5',         # augmented triad (M3+M3)
    '5':     '1 5',            # power chord
    'sus2':  '1 2 5',
    'sus4':  '1 4 5',
    '6':     '1 3 5 6',        # 6 chord aka add6
    'm6':    '1 b3 5 6',
    '7':     '1 3 5 b7',       # dominant 7th
    'maj7':  '1 3 5 7',
    'm7':    '1 b3 5 b7',
    'mmaj7': '1 b3 5 7',
    'dim7':  '1 b3 b5 bb7',
    'hdim7': '1 b3 b5 b7',     # half diminished 7th (diminished triad with minor 7th), also called m7b5
    '7sus4': '1 4 5 b7',
    'add9':  '1 3 5 9',
    '9':     '1 3 5 b7 9',     # dominant 9th
    'maj9':  '1 3 5 7 9',
    'm9':    '1 b3 5 b7 9',
    }


# string replacement aliases for chord types:
chord_type_aliases = {
    '':      ['maj', 'major', 'M'],
    'm':     ['min', 'minor', '-'],
    'dim':   ['diminished', 'o', '°'],
    'aug':   ['augmented', '+'],
    '5':     ['(no3)', 'power'],
    'sus4':  ['sus'],
    '7':     ['dom7', 'dominant'],
    'maj7':  ['M7', 'Δ', 'Δ7'],
    'm7':    ['min7', '-7'],
    'mmaj7': ['mM7', 'minmaj7'],
    'dim7':  ['o7', '°7'],
    'hdim7': ['m7b5', 'm7♭5', 'ø', 'ø7'],
    'add9':  ['add2'],
    'maj9':  ['M9', 'Δ9'],
    'm9':    ['min9'],
    }
