from ..frettings import FretPosition, Fretting, chord_frets, partition_frets_by_string
from ..frettings import chord_frettings, sort_frettings, best_fretting_for
from ..instruments import FrettedInstrument, guitar, ukulele
from ..notes import OctaveNote
from ..chords import Chord
from ..util import log
from .testing_tools import compare

from dataclasses import FrozenInstanceError
from contextlib import redirect_stdout
import io
import pytest

# four strings a fourth apart, so that string s sounds 5*s semitones when open:
fourths = FrettedInstrument('fourths', tuning=[OctaveNote(value=v) for v in (0, 5, 10, 15)])
# major triad on the very lowest note:
low_c = Chord(root=OctaveNote(value=0), intervals=[0, 4, 7])


def test_fret_positions():
    pos = FretPosition(string_index=2, fret_number=3, semitones=58)
    compare(str(pos), '2.3(58)')
    compare(pos.as_dict(), {'string': 2, 'fret': 3, 'semitones': 58})
    # identity is string and fret only:
    compare(pos, FretPosition(2, 3, 0))
    compare(len({pos, FretPosition(2, 3, 0), FretPosition(2, 4, 59)}), 2)
    with pytest.raises(FrozenInstanceError):
        pos.fret_number = 5

def test_chord_frets():
    compare(fourths.string_indices, [0, 1, 2, 3])
    compare([fourths.pitch_at(s, 0).semitones for s in fourths.string_indices], [0, 5, 10, 15])

    positions = chord_frets(low_c, fourths)
    compare(positions, {FretPosition(0, 0, 0), FretPosition(0, 4, 4),
                        FretPosition(1, 2, 7),
                        FretPosition(2, 2, 12),
                        FretPosition(3, 1, 16), FretPosition(3, 4, 19)})
    # the bound is inclusive:
    compare(FretPosition(0, 0, 0) in chord_frets(low_c, fourths, highest_fret=0), True)
    compare(FretPosition(0, 4, 4) in chord_frets(low_c, fourths, highest_fret=3), False)
    # and every candidate sounds a chord tone:
    for pos in chord_frets(Chord('Am7'), guitar, highest_fret=7):
        compare(pos.semitones % 12 in Chord('Am7').pitch_classes, True)
        compare(pos.semitones, guitar.pitch_at(pos.string_index, pos.fret_number).semitones)

    partitions = partition_frets_by_string(low_c, fourths)
    compare([p.fret_number for p in partitions[0]], [0, 4])
    compare([p.fret_number for p in partitions[3]], [1, 4])

def test_ranked_frettings():
    frettings = chord_frettings(low_c, fourths)
    compare([f.fret_string for f in frettings], ['422x', '0221', '4221', '02x1', 'x221', '4224', '4x24'])
    compare([f.inversion_index for f in frettings], [0, 1, 1, 1, 1, 2, 2])
    # a doubled chord tone needs no extra pitch class:
    doubled = Chord(root=OctaveNote(value=0), intervals=[0, 4, 4, 7])
    compare([f.fret_string for f in chord_frettings(doubled, fourths)], [f.fret_string for f in frettings])

    best = best_fretting_for(low_c, fourths)
    compare(best.fret_string, '422x')
    compare(best.pitch_classes, {0, 4, 7})
    compare(best.string_fret_list, [4, 2, 2, None])
    # positions run from the highest string index down:
    compare([pos.string_index for pos in best.positions], [2, 1, 0])
    compare(best.intervals.values, [0, 7, 4])

def test_common_chords():
    # strings are numbered from the bass, so the first position is on the treble side,
    # and root position means the root is the highest note:
    c_major = best_fretting_for(Chord('C'), guitar)
    compare(c_major.fret_string, '03201x')
    compare([p.name for p in c_major.pitches], ['C4', 'G3', 'E3', 'C3', 'E2'])
    compare(c_major.intervals.values, [0, 7, 4, 0, 4])
    compare(c_major.inversion_index, 0)
    compare(c_major.open_string_count, 2)
    compare(c_major.sounded_string_count, 5)
    # the same shape with the bass string stopped comes next:
    compare(chord_frettings(Chord('C'), guitar)[1].fret_string, '33201x')

    # the familiar open shape has the open E on top, so is a first inversion:
    open_c = Fretting.from_fret_string('x32010', guitar, Chord('C'))
    compare([p.name for p in open_c.pitches], ['E4', 'C4', 'G3', 'E3', 'C3'])
    compare(open_c.inversion_index, 1)

    uke_c = best_fretting_for(Chord('C'), ukulele)
    compare(uke_c.fret_string, '0003')
    compare(uke_c.inversion_index, 0)
    compare(uke_c.open_string_count, 3)
    compare([f.fret_string for f in chord_frettings(Chord('C'), ukulele)[:3]], ['0003', '0403', '0433'])

def test_octave_doublings():
    # a chord given as notes may double its root an octave up:
    doubled_c = Chord(notes=['C3', 'E3', 'G3', 'C4'])
    frettings = chord_frettings(doubled_c, guitar)
    compare(len(frettings) > 0, True)
    for f in frettings:
        compare(f.pitch_classes, {0, 4, 7})
    compare(frettings[0].fret_string, best_fretting_for(Chord('C'), guitar).fret_string)

    # and on strings tuned 0, 5, 10, 15 semitones, it frets just as the plain triad does:
    low_doubled = Chord(notes=[OctaveNote(value=v) for v in (0, 4, 7, 12)])
    compare([f.fret_string for f in chord_frettings(low_doubled, fourths)],
            [f.fret_string for f in chord_frettings(low_c, fourths)])

def test_search_invariants():
    chord = Chord('G')
    frettings = chord_frettings(chord, guitar)
    compare(len(frettings) > 0, True)

    placements = set()
    for f in frettings:
        string_indices = [pos.string_index for pos in f.positions]
        # one position per string, sorted descending:
        compare(len(string_indices), len(set(string_indices)))
        compare(string_indices, sorted(string_indices, reverse=True))
        # every position inside the bound, sounding a chord tone, covering the chord:
        compare(all([0 <= pos.fret_number <= 4 for pos in f.positions]), True)
        compare(f.pitch_classes.issubset(chord.pitch_classes), True)
        compare(len(f.pitch_classes) >= len(chord.intervals), True)
        placements.add(frozenset(f.positions))
    # no two results place the same frets:
    compare(len(placements), len(frettings))

    # ranking order:
    for earlier, later in zip(frettings, frettings[1:]):
        compare(earlier.inversion_index <= later.inversion_index, True)
        if earlier.inversion_index == later.inversion_index:
            compare(earlier.sounded_string_count >= later.sounded_string_count, True)
            if earlier.sounded_string_count == later.sounded_string_count:
                compare(earlier.open_string_count >= later.open_string_count, True)

    # ranking a ranked list changes nothing:
    compare(sort_frettings(frettings), frettings)
    # and ranking does not depend on the order frettings come in:
    compare(sort_frettings(list(reversed(frettings)))[0].fret_string, frettings[0].fret_string)

def test_fret_strings():
    chord = Chord('C')
    for f in chord_frettings(chord, guitar):
        parsed = Fretting.from_fret_string(f.fret_string, guitar, chord)
        compare(parsed, f, 'positions')
        compare([pos.semitones for pos in parsed.positions], [pos.semitones for pos in f.positions])
        compare(str(parsed), f.fret_string)

    muted = Fretting.from_fret_string('xxxxxx', guitar, chord)
    compare(muted.positions, [])
    compare(muted.string_fret_list, [None]*6)
    compare(muted.fret_string, 'xxxxxx')

    with pytest.raises(ValueError, match='wrong length'):
        Fretting.from_fret_string('x3', guitar, chord)
    with pytest.raises(ValueError, match='Invalid character g'):
        Fretting.from_fret_string('xxg0xx', guitar, chord)
    with pytest.raises(ValueError):
        Fretting.from_fret_string('-10000', guitar, chord)

def test_fretting_construction():
    chord = Chord('C')
    # frettings compare by identity, not by placement:
    a = Fretting.from_fret_string('x32010', guitar, chord)
    b = Fretting.from_fret_string('x32010', guitar, chord)
    compare(a == b, False)
    compare(a.same_positions(b), True)
    compare(a.instrument is guitar, True)
    compare(a.chord, chord)

    # positions are sorted whatever order they arrive in:
    shuffled = Fretting(guitar, chord, [FretPosition(4, 1, 60), FretPosition(1, 3, 48), FretPosition(2, 2, 52)])
    compare([pos.string_index for pos in shuffled.positions], [4, 2, 1])
    compare(shuffled.fret_string, 'x32x1x')

    with pytest.raises(AssertionError):
        Fretting(guitar, chord, [FretPosition(0, 0, 40), FretPosition(0, 3, 43)])
    with pytest.raises(TypeError):
        Fretting(guitar, 'C', [])

    # frets above 9 can be placed, but not written as a fret string:
    high = Fretting(guitar, chord, [FretPosition(0, 12, 52), FretPosition(1, 1, 46)])
    compare(high.string_fret_list, [12, 1, None, None, None, None])
    with pytest.raises(NotImplementedError, match='fret >= 10'):
        high.fret_string
    compare('12-1-x' in repr(high), True)

def test_inversions():
    chord = Chord('C')
    # the first position is on the highest-numbered sounded string:
    compare(Fretting.from_fret_string('x3201x', guitar, chord).inversion_index, 0)
    compare(Fretting.from_fret_string('032xxx', guitar, chord).inversion_index, 1)
    compare(Fretting.from_fret_string('x320xx', guitar, chord).inversion_index, 2)
    with pytest.raises(IndexError):
        Fretting.from_fret_string('xxxxxx', guitar, chord).inversion_index

    # a fretting that starts on the 4th of a sus4 chord matches no reference degree:
    sus4 = Chord(root=OctaveNote(value=0), intervals=[0, 5, 7])
    on_fourth = Fretting.from_fret_string('00xx', fourths, sus4)
    compare(on_fourth.intervals[0].number, 4)
    compare(on_fourth.inversion_index, -1)
    on_root = Fretting.from_fret_string('x02x', fourths, sus4)
    compare(on_root.inversion_index, 0)
    ranked = sort_frettings([on_root, on_fourth])
    compare(ranked[0] is on_fourth, True)

def test_empty_results():
    compare(chord_frets(low_c, fourths, highest_fret=-1), set())
    compare(chord_frettings(low_c, fourths, highest_fret=-1), [])
    with pytest.raises(ValueError, match='No frettings'):
        best_fretting_for(low_c, fourths, highest_fret=-1)
    with pytest.raises(TypeError):
        chord_frettings('C', guitar)

def test_search_logging():
    out = io.StringIO()
    log.verbose = True
    try:
        with redirect_stdout(out):
            chord_frettings(low_c, fourths)
    finally:
        log.verbose = False
    out = out.getvalue()
    compare('Found 7 frettings' in out, True)
    compare('String 0: 2 candidate frets [0, 4]' in out, True)


def unit_test():
    test_fret_positions()
    test_chord_frets()
    test_ranked_frettings()
    test_common_chords()
    test_octave_doublings()
    test_search_invariants()
    test_fret_strings()
    test_fretting_construction()
    test_inversions()
    test_empty_results()
    test_search_logging()

if __name__ == '__main__':
    unit_test()
