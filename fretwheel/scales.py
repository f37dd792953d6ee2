"""Scale definitions as ordered (degree, semitone offset) pairs.

The registry is static.  Three scale types are supported; the string names
double as the values the selection state stores:

- ``"major"`` - the major (Ionian) scale, degrees 1-7
- ``"minor"`` - the natural minor (Aeolian) scale, degrees 1-7
- ``"chromatic"`` - every semitone, "degrees" 1-12
"""

import typing

import fretwheel.pitch_classes


MAJOR = "major"
NATURAL_MINOR = "minor"
CHROMATIC = "chromatic"

DIATONIC_SCALE_TYPES: typing.Tuple[str, ...] = (MAJOR, NATURAL_MINOR)


ScaleDegrees = typing.Tuple[typing.Tuple[int, int], ...]


SCALE_DEGREES: typing.Dict[str, ScaleDegrees] = {
	MAJOR:         ((1, 0), (2, 2), (3, 4), (4, 5), (5, 7), (6, 9), (7, 11)),
	NATURAL_MINOR: ((1, 0), (2, 2), (3, 3), (4, 5), (5, 7), (6, 8), (7, 10)),
	CHROMATIC:     tuple((offset + 1, offset) for offset in range(12)),
}


SCALE_TYPE_ALIASES: typing.Dict[str, str] = {
	"major":         MAJOR,
	"ionian":        MAJOR,
	"minor":         NATURAL_MINOR,
	"natural_minor": NATURAL_MINOR,
	"aeolian":       NATURAL_MINOR,
	"chromatic":     CHROMATIC,
}


DIATONIC_DEGREE_LABELS: typing.Tuple[str, ...] = (
	"Root", "2nd", "3rd", "4th", "5th", "6th", "7th"
)

CHROMATIC_DEGREE_LABELS: typing.Tuple[str, ...] = (
	"Root", "b2nd", "2nd", "b3rd", "3rd", "4th", "b5th", "5th", "b6th", "6th", "b7th", "7th"
)


def scale_type_from_name (name: str) -> str:

	"""Resolve a scale type name or alias to one of the registry keys.

	Parameters:
		name: Case-insensitive name such as ``"Major"``, ``"aeolian"`` or
			``"natural minor"``.

	Raises:
		ValueError: If the name is not a known scale type.
	"""

	key = name.strip().lower().replace(" ", "_").replace("-", "_")

	if key not in SCALE_TYPE_ALIASES:
		raise ValueError(f"Unknown scale type '{name}'. Available: {sorted(SCALE_TYPE_ALIASES)}")

	return SCALE_TYPE_ALIASES[key]


def degrees_of (scale_type: str) -> ScaleDegrees:

	"""
	Return the ordered (degree, semitone offset) pairs for a scale type.
	"""

	if scale_type not in SCALE_DEGREES:
		raise ValueError(f"Unknown scale type '{scale_type}'. Available: {sorted(SCALE_DEGREES)}")

	return SCALE_DEGREES[scale_type]


def is_diatonic (scale_type: str) -> bool:

	"""True for the seven-note scale types that have a relative major/minor."""

	return scale_type in DIATONIC_SCALE_TYPES


def scale_pitch_classes (
	root: fretwheel.pitch_classes.PitchClass,
	scale_type: str = MAJOR
) -> typing.List[fretwheel.pitch_classes.PitchClass]:

	"""Return the pitch classes of a scale in degree order.

	Example:
		```python
		a = fretwheel.pitch_classes.normalize("A")
		[pc.name for pc in scale_pitch_classes(a, "minor")]
		# → ['A', 'B', 'C', 'D', 'E', 'F', 'G']
		```
	"""

	return [fretwheel.pitch_classes.transpose(root, offset) for _, offset in degrees_of(scale_type)]


def degree_label (degree: int, scale_type: str) -> str:

	"""Return the legend label for a degree, e.g. ``"3rd"`` or ``"b2nd"``."""

	labels = CHROMATIC_DEGREE_LABELS if scale_type == CHROMATIC else DIATONIC_DEGREE_LABELS

	if not 1 <= degree <= len(labels):
		raise ValueError(f"Degree {degree} out of range for scale type '{scale_type}'")

	return labels[degree - 1]
