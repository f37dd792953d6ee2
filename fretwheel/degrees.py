"""Scale-degree classification.

``classify`` is a pure function of (target, tonic, scale type).  A note that
is not in the scale is a normal result (``OUT_OF_SCALE``), not an error.
"""

import dataclasses
import typing

import fretwheel.pitch_classes
import fretwheel.scales


@dataclasses.dataclass(frozen=True)
class DegreeResult:

	"""
	The 1-based scale degree of a note, or ``None`` when it is out of scale.
	"""

	degree: typing.Optional[int] = None

	@property
	def in_scale (self) -> bool:

		return self.degree is not None


OUT_OF_SCALE = DegreeResult(None)


def in_scale (degree: int) -> DegreeResult:

	"""Shorthand for an in-scale result."""

	return DegreeResult(degree)


def classify (
	target: fretwheel.pitch_classes.PitchClass,
	tonic: fretwheel.pitch_classes.PitchClass,
	scale_type: str
) -> DegreeResult:

	"""Return the degree of ``target`` in the scale built on ``tonic``.

	Example:
		```python
		c = fretwheel.pitch_classes.normalize("C")
		e = fretwheel.pitch_classes.normalize("E")
		classify(e, c, "major")   # → DegreeResult(degree=3)
		```
	"""

	semitones = fretwheel.pitch_classes.interval(target, tonic)

	for degree, offset in fretwheel.scales.degrees_of(scale_type):
		if offset == semitones:
			return DegreeResult(degree)

	return OUT_OF_SCALE


def classify_all (
	tonic: fretwheel.pitch_classes.PitchClass,
	scale_type: str
) -> typing.Dict[fretwheel.pitch_classes.PitchClass, DegreeResult]:

	"""Classify all 12 pitch classes against one tonic, in chromatic order.

	The fretboard pass looks positions up in this table instead of
	classifying each one.
	"""

	return {pc: classify(pc, tonic, scale_type) for pc in fretwheel.pitch_classes.PITCH_CLASSES}
