"""Pitch class table and enharmonic normalization.

The twelve pitch classes are built once into ``PITCH_CLASSES`` and never
mutated.  Every note spelling that reaches the rest of the package goes
through :func:`normalize` first, which accepts sharps, flats, unicode
accidentals and the chord-quality decorations used on the circle-of-fifths
rings (``"F#m"``, ``"B°"``, ``"Gø"``, ``"Edim"``).

Module-level helpers:
- `normalize(spelling)`: Return the canonical `PitchClass` for a spelling.
- `index_of(pc)` / `at(index)`: Convert between pitch classes and 0-11.
- `transpose(pc, semitones)`: Move a pitch class by any number of semitones.
- `interval(target, tonic)`: Semitones (0-11) from a tonic up to a target.
"""

import dataclasses
import typing


CANONICAL_NAMES: typing.Tuple[str, ...] = (
	"C",
	"Db",
	"D",
	"Eb",
	"E",
	"F",
	"Gb",
	"G",
	"Ab",
	"A",
	"Bb",
	"B",
)

NOTE_NAME_TO_INDEX: typing.Dict[str, int] = {
	"C": 0,
	"B#": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"Fb": 4,
	"F": 5,
	"E#": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
	"Cb": 11,
}

# Longest first, so "m7b5" is not read as a bare "m".
QUALITY_SUFFIXES: typing.Tuple[str, ...] = (
	"m7b5",
	"dim7",
	"°7",
	"ø7",
	"dim",
	"°",
	"ø",
	"m",
)

_ACCIDENTALS: typing.Dict[str, str] = {
	"♭": "b",
	"♯": "#",
}


class UnknownPitchClass (ValueError):

	"""
	Raised when a note spelling cannot be resolved to one of the 12 pitch classes.
	"""

	def __init__ (self, spelling: str) -> None:

		self.spelling = spelling

		super().__init__(
			f"Unknown pitch class: {spelling!r}. Expected e.g. 'C', 'F#', 'Bb', 'Am', 'B°'."
		)


@dataclasses.dataclass(frozen=True)
class PitchClass:

	"""
	One of the 12 octave-equivalent notes, identified by its index (C = 0).
	"""

	index: int

	def __post_init__ (self) -> None:

		if not 0 <= self.index < 12:
			raise ValueError(f"Pitch class index must be 0-11, got {self.index}")

	@property
	def name (self) -> str:

		"""Canonical (flat) spelling."""

		return CANONICAL_NAMES[self.index]

	def __str__ (self) -> str:

		return self.name


PITCH_CLASSES: typing.Tuple[PitchClass, ...] = tuple(PitchClass(i) for i in range(12))


def _strip_decorations (spelling: str) -> str:

	"""Remove accidentals in unicode form and a single trailing chord-quality suffix."""

	cleaned = spelling.strip()

	for symbol, replacement in _ACCIDENTALS.items():
		cleaned = cleaned.replace(symbol, replacement)

	for suffix in QUALITY_SUFFIXES:
		if len(cleaned) > len(suffix) and cleaned.endswith(suffix):
			cleaned = cleaned[:-len(suffix)]
			break

	if cleaned:
		cleaned = cleaned[0].upper() + cleaned[1:]

	return cleaned


def normalize (spelling: typing.Union[str, PitchClass]) -> PitchClass:

	"""Resolve a note spelling to its canonical pitch class.

	Parameters:
		spelling: A note name, optionally decorated with a chord-quality
			suffix, or a ``PitchClass`` (returned unchanged).

	Returns:
		The matching entry of ``PITCH_CLASSES``.

	Raises:
		UnknownPitchClass: If nothing recognisable remains after stripping
			decorations.

	Example:
		```python
		normalize("C#")    # → PitchClass(index=1)  (Db)
		normalize("Bbm")   # → PitchClass(index=10) (Bb)
		normalize("F#°")   # → PitchClass(index=6)  (Gb)
		```
	"""

	if isinstance(spelling, PitchClass):
		return spelling

	if not isinstance(spelling, str):
		raise UnknownPitchClass(repr(spelling))

	cleaned = _strip_decorations(spelling)

	if cleaned not in NOTE_NAME_TO_INDEX:
		raise UnknownPitchClass(spelling)

	return PITCH_CLASSES[NOTE_NAME_TO_INDEX[cleaned]]


def index_of (pc: PitchClass) -> int:

	"""Return the canonical index (0-11) of a pitch class."""

	return pc.index


def at (index: int) -> PitchClass:

	"""Return the pitch class at an index, reduced modulo 12."""

	return PITCH_CLASSES[((index % 12) + 12) % 12]


def transpose (pc: PitchClass, semitones: int) -> PitchClass:

	"""Move a pitch class by a (possibly negative) number of semitones.

	Example:
		```python
		transpose(normalize("C"), 9)    # → A
		transpose(normalize("C"), -1)   # → B
		```
	"""

	return at(index_of(pc) + semitones)


def interval (target: PitchClass, tonic: PitchClass) -> int:

	"""Return the ascending interval in semitones (0-11) from tonic to target."""

	return (index_of(target) - index_of(tonic) + 12) % 12
