from ..instruments import FrettedInstrument, Guitar, String, force_ascending, get_instrument
from ..instruments import guitar, standard, dadgad, ukulele, banjo, bass, fretted_instruments
from ..notes import OctaveNote, NoteList
from .testing_tools import compare

import pytest

def test_tunings():
    compare(standard.tuning, 'EADGBE')
    compare(standard.tuning_name, 'standard')
    compare(dadgad.tuning, 'DADGAD')
    compare(ukulele.tuning, 'GCEA')
    compare(bass.string_count, 4)

    # tunings from bare note names are placed in ascending octaves:
    compare(Guitar('DADGBE').tuning_name, 'dropD')
    compare([n.name for n in force_ascending('EADGBE')], ['E2', 'A2', 'D3', 'G3', 'B3', 'E4'])
    # or can be given explicitly:
    compare(Guitar('E2 A2 D3 G3 B3 E4').tuning_name, 'standard')
    compare(FrettedInstrument('mandola', ['C3', 'G3', 'D4', 'A4']).tuning, 'CGDA')
    compare(String('A2')(3), OctaveNote('C3'))

def test_string_numbering():
    # string 0 is the first string of the tuning:
    compare(guitar.string_indices, [0, 1, 2, 3, 4, 5])
    compare([s.name for s in guitar.string_pitches], ['E2', 'A2', 'D3', 'G3', 'B3', 'E4'])
    compare(guitar.pitch_at(0, 0), OctaveNote('E2'))
    compare(guitar.pitch_at(5, 0), OctaveNote('E4'))
    compare(guitar.pitch_at(1, 3), OctaveNote('C3'))
    # so the re-entrant G string of a ukulele is string 0, even though it is not the lowest:
    compare(ukulele.pitch_at(0, 0), OctaveNote('G4'))
    compare(ukulele.pitch_at(1, 0), OctaveNote('C4'))
    compare(banjo.pitch_at(0, 0), OctaveNote('G4'))
    compare(banjo.pitch_at(1, 0), OctaveNote('D3'))

    # frets are listed in string order too:
    compare(guitar.fret([None, 3, 2, 0, 1, 0]), NoteList(['C3', 'E3', 'G3', 'C4', 'E4'], strip_octave=False))

    with pytest.raises(IndexError):
        guitar.pitch_at(6, 0)
    with pytest.raises(ValueError):
        guitar.pitch_at(0, -1)
    with pytest.raises(ValueError):
        guitar.fret([0, 1, 2])

def test_capo():
    capo_2 = guitar.with_capo(2)
    compare(capo_2.pitch_at(0, 0), OctaveNote('F#2'))
    compare(capo_2.pitch_at(0, 3), OctaveNote('A2'))
    compare(capo_2.tuning, 'EADGBE')
    compare(str(capo_2), '〚Guitar: EADGBE+2: F♯BEAC♯F♯ 〛')
    # the uncapo'd instrument is untouched:
    compare(guitar.pitch_at(0, 0), OctaveNote('E2'))
    with pytest.raises(ValueError):
        Guitar(capo=-1)

def test_registry():
    compare(get_instrument('ukulele') is ukulele, True)
    compare(get_instrument('guitar') is guitar, True)
    compare(set(fretted_instruments.keys()), {'guitar', 'ukulele', 'baritone ukulele', 'banjo', 'mandolin', 'bass'})
    with pytest.raises(ValueError):
        get_instrument('theremin')

def test_membership():
    compare('E' in guitar, True)
    compare('C' in guitar, False)
    compare(OctaveNote('E2') in guitar, True)
    compare(OctaveNote('E3') in guitar, False)
    compare(str(guitar), '〚Guitar: EADGBE 〛')


def unit_test():
    test_tunings()
    test_string_numbering()
    test_capo()
    test_registry()
    test_membership()

if __name__ == '__main__':
    unit_test()
