"""Relative major / minor resolution.

Every degree the wheel and the fretboard highlight is measured from one of
the two tonics returned here.  A major key's relative minor sits 9 semitones
above it; a minor key's relative major sits 3 semitones above it.
"""

import dataclasses

import fretwheel.pitch_classes
import fretwheel.scales


RELATIVE_MINOR_OFFSET = 9
RELATIVE_MAJOR_OFFSET = 3
LEADING_TONE_OFFSET = 11


@dataclasses.dataclass(frozen=True)
class RelativeKeys:

	"""
	The major and natural-minor tonics that share one set of seven notes.
	"""

	major_tonic: fretwheel.pitch_classes.PitchClass
	minor_tonic: fretwheel.pitch_classes.PitchClass


def relative_keys (root: fretwheel.pitch_classes.PitchClass, scale_type: str) -> RelativeKeys:

	"""Return the relative major and minor tonics for a root and scale type.

	Parameters:
		root: The selected root pitch class.
		scale_type: ``"major"`` or ``"minor"``.

	Raises:
		ValueError: For chromatic or unknown scale types; chromatic mode
			classifies directly against the root instead.

	Example:
		```python
		c = fretwheel.pitch_classes.normalize("C")
		relative_keys(c, "major")   # → RelativeKeys(major_tonic=C, minor_tonic=A)
		```
	"""

	if scale_type == fretwheel.scales.MAJOR:
		return RelativeKeys(
			major_tonic = root,
			minor_tonic = fretwheel.pitch_classes.transpose(root, RELATIVE_MINOR_OFFSET)
		)

	if scale_type == fretwheel.scales.NATURAL_MINOR:
		return RelativeKeys(
			major_tonic = fretwheel.pitch_classes.transpose(root, RELATIVE_MAJOR_OFFSET),
			minor_tonic = root
		)

	raise ValueError(f"Relative keys are only defined for major and minor scales, got '{scale_type}'")


def leading_tone (major_tonic: fretwheel.pitch_classes.PitchClass) -> fretwheel.pitch_classes.PitchClass:

	"""Return the major 7th above a major tonic (the diminished-ring root)."""

	return fretwheel.pitch_classes.transpose(major_tonic, LEADING_TONE_OFFSET)
