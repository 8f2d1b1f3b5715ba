from .parsing import degree_names, num_suffixes
from . import _settings
from functools import cached_property

# interval instances are cached for fast init, since they get called a lot:
cached_intervals = {}

class Interval:
    """a signed distance between notes, defined in semitones and degrees (whole-tones).
    infers degree from semitone distance automatically,
    but degree can be specified explicitly to infer an
    augmented or diminished interval etc."""

    max_degree = 7
    span_size = 12 # i.e. semitones per octave
    def __init__(self, value, degree=None):
        if isinstance(value, Interval):
            # accept re-casting from another interval object:
            if degree is None:
                degree = value.extended_degree
            value = value.value
        if not isinstance(value, int):
            raise TypeError(f'Interval value must be an int, but got: {type(value)}')
        self.value = value

        # value is directional, but width is absolute:
        self.width = abs(self.value)
        # whole-octave width, and interval width-within-octave (both strictly positive)
        self.octave_span, self.mod = divmod(self.width, self.span_size)
        self.sign = -1 if self.value < 0 else 1
        self.descending = (self.sign == -1)
        # compound intervals span more than an octave:
        self.compound = (self.width >= self.span_size)

        self._set_degree(degree)

    def _set_degree(self, degree):
        if degree is None:
            # no degree provided, so auto-detect degree by assuming ordinary diatonic intervals:
            self.degree = default_interval_degrees[self.mod]
        else:
            if degree < 1:
                raise ValueError(f'Interval degree must be positive, but got: {degree}')
            # degree has been provided, possibly as an extended degree like 9 or 11:
            mod_degree = ((degree - 1) % self.max_degree) + 1
            default_value = default_degree_intervals[mod_degree]
            # an explicit degree may be at most a doubly-augmented/diminished step from its default:
            if min((self.mod - default_value) % 12, (default_value - self.mod) % 12) > 2:
                raise ValueError(f'Interval of semitone distance {self.value} cannot correspond to degree={degree}')
            self.degree = mod_degree

        # self.extended_degree is >=8 if this is a ninth or eleventh etc,
        # but self.degree is always mod-7, and both are strictly positive
        self.extended_degree = self.degree + (self.max_degree*self.octave_span)

    @staticmethod
    def from_semitones(semitones):
        """initialise the ordinary (default-degree) Interval spanning some
        number of semitones within a single octave, i.e. 0 to 11 inclusive"""
        if not (0 <= semitones < 12):
            raise ValueError(f'Interval.from_semitones expects a value in [0, 12), but got: {semitones}')
        return Interval.from_cache(semitones)

    @staticmethod
    def from_degree(degree, offset=0):
        """alternative init method: given a (possibly extended) degree
        and an optional semitone offset from its major/perfect form,
        initialise the appropriate Interval object."""
        octave_span, mod_degree = divmod(degree - 1, 7)
        mod_degree += 1
        value = default_degree_intervals[mod_degree] + (12*octave_span) + offset
        return Interval.from_cache(value, degree)

    @staticmethod
    def from_cache(value, degree=None):
        """return a cached Interval object with this value if it exists,
        otherwise initialise a new one"""
        if (value, degree) in cached_intervals:
            return cached_intervals[(value, degree)]
        new_interval = Interval(value, degree)
        cached_intervals[(value, degree)] = new_interval
        return new_interval

    @property
    def number(self):
        """the conventional scale-degree number of this interval,
        i.e. 3 for a major or minor third, 9 for a ninth"""
        return self.extended_degree

    @property
    def offset_from_default(self):
        """how many semitones this interval is from its major/perfect form"""
        offset = self.mod - default_degree_intervals[self.degree]
        # wrap around the octave, for e.g. a diminished unison:
        if offset > 6:
            offset -= 12
        elif offset < -6:
            offset += 12
        return offset

    @property
    def quality(self):
        if self.degree in self.perfect_degrees:
            return perfect_qualities[self.offset_from_default]
        else:
            return major_qualities[self.offset_from_default]

    def __int__(self):
        return self.value

    def __add__(self, other):
        return Interval.from_cache(self.value + int(other))

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):
        return Interval.from_cache(self.value - int(other))

    def __neg__(self):
        return Interval.from_cache(-self.value)

    def __mod__(self, m):
        return Interval.from_cache(self.value % int(m))

    def __eq__(self, other):
        """Value equivalence comparison for intervals - returns True if both have
        same value (but disregard degree)"""
        if isinstance(other, Interval):
            return self.value == other.value
        elif isinstance(other, int):
            return self.value == other
        else:
            raise TypeError('Intervals can only be compared to integers or other Intervals')

    def __lt__(self, other):
        return self.value < int(other)

    def __hash__(self):
        """intervals only hash their values, not their degrees"""
        return hash(self.value)

    @cached_property
    def name(self):
        if self.extended_degree in degree_names:
            degree_name = degree_names[self.extended_degree]
        else:
            degree_name = f'{self.extended_degree}{num_suffixes[self.extended_degree % 10]}'
        direction = ' (descending)' if self.descending else ''
        return f'{quality_names[self.quality]} {degree_name}{direction}'.capitalize()

    @cached_property
    def short_name(self):
        if self.value == 0:
            return 'Rt'
        sign_str = '-' if self.descending else ''
        return f'{sign_str}{self.quality}{self.extended_degree}'

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.value}:{self.name}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Interval']

    perfect_degrees = {1,4,5}


class IntervalList(list):
    """a list of Intervals, with some useful methods"""
    def __init__(self, *items):
        if len(items) == 1 and not isinstance(items[0], (int, Interval)):
            # we've been passed a single iterable of intervals:
            items = items[0]
        super().__init__([Interval.from_cache(i) if isinstance(i, int) else i for i in items])

    @property
    def values(self):
        return [iv.value for iv in self]

    def unique(self, by_pitch_class=False):
        """returns a new IntervalList with duplicate values removed, preserving order.
        if by_pitch_class, intervals an octave apart (like 4 and 16) also count as duplicates,
        and only the first of them is kept"""
        seen, unique_ivs = set(), []
        for iv in self:
            key = iv.value % 12 if by_pitch_class else iv.value
            if key not in seen:
                seen.add(key)
                unique_ivs.append(iv)
        return IntervalList(unique_ivs)

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}' + ', '.join([iv.short_name for iv in self]) + f'{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['IntervalList']


default_interval_degrees = {
                0: 1,          # e.g. unison (0 semitones) is degree 1
                1:2, 2:2,      # seconds (1 or 2 semitones) are degree 2, etc.
                3:3, 4:3,
                5:4,
                6:5,           # by convention: dim5 is more common than aug4
                7:5,
                8:6, 9:6,
                10:7, 11:7,
                }

default_degree_intervals = {
                1: 0, # unison
                2: 2, # maj2
                3: 4, # maj3
                4: 5, # per4
                5: 7, # per5
                6: 9, # maj6
                7: 11, # maj7
                }

# short quality names by semitone offset from the default interval of each degree:
perfect_qualities = {-2: 'dd', -1: 'd', 0: 'P', 1: 'A', 2: 'AA'}
major_qualities = {-2: 'd', -1: 'm', 0: 'M', 1: 'A', 2: 'AA'}
quality_names = {'dd': 'doubly diminished', 'd': 'diminished', 'm': 'minor',
                 'P': 'perfect', 'M': 'major', 'A': 'augmented', 'AA': 'doubly augmented'}


# interval aliases:
Unison = P1 = Rt = Interval(0)
MinorSecond = m2 = Interval(1)
MajorSecond = M2 = Interval(2)
MinorThird = m3 = Interval(3)
MajorThird = M3 = Interval(4)
PerfectFourth = P4 = Interval(5)
AugmentedFourth = A4 = Interval(6, degree=4)
DiminishedFifth = d5 = Interval(6)
PerfectFifth = P5 = Interval(7)
AugmentedFifth = A5 = Interval(8, degree=5)
MinorSixth = m6 = Interval(8)
MajorSixth = M6 = Interval(9)
DiminishedSeventh = d7 = Interval(9, degree=7)
MinorSeventh = m7 = Interval(10)
MajorSeventh = M7 = Interval(11)
Octave = P8 = Interval(12)
MinorNinth = m9 = Interval(13)
MajorNinth = M9 = Interval(14)
AugmentedNinth = A9 = Interval(15, degree=9)
PerfectEleventh = P11 = Interval(17)
MajorThirteenth = M13 = Interval(21)

common_intervals = [P1, m2, M2, m3, M3, P4, d5, P5, m6, M6, m7, M7, P8, m9, M9, P11, M13]
# cache common intervals by semitone value and scale degree for efficiency:
cached_intervals.update({(iv.value, iv.extended_degree):iv for iv in common_intervals})
# None is also a valid degree index for the default/common intervals:
cached_intervals.update({(iv.value, None):iv for iv in common_intervals})
