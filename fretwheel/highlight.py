"""Degree to color / shape encoding.

Colors are plain CSS color names so a renderer can apply them directly.
The diatonic palette is indexed by ``degree - 1``; the chromatic palette
gives all 12 semitones a color, and natural tones keep their diatonic hue.

The set of fills that take white label text is an enumerated list, not a
luminance threshold.  It is configurable per encoder (and through the YAML
config) because the list differs between deployments.

```python
encoder = HighlightEncoder()
style = encoder.style_for(DegreeResult(3), "major")
style.fill_color    # "yellow"
style.label_color   # "black"
```
"""

import dataclasses
import typing

import fretwheel.degrees
import fretwheel.scales


DIATONIC_PALETTE: typing.Tuple[str, ...] = (
	"red",
	"brown",
	"yellow",
	"green",
	"blue",
	"orange",
	"violet",
)

CHROMATIC_PALETTE: typing.Tuple[str, ...] = (
	"red",     # Root
	"pink",    # b2nd
	"brown",   # 2nd
	"gold",    # b3rd
	"yellow",  # 3rd
	"green",   # 4th
	"teal",    # b5th
	"blue",    # 5th
	"coral",   # b6th
	"orange",  # 6th
	"purple",  # b7th
	"violet",  # 7th
)

NEUTRAL_FILL = "white"
MINOR_RING_NEUTRAL_FILL = "lightyellow"

LABEL_ON_DARK = "white"
LABEL_ON_LIGHT = "black"

DEFAULT_DARK_COLORS: typing.Tuple[str, ...] = (
	"brown",
	"blue",
	"violet",
	"green",
	"purple",
	"teal",
)

SHAPE_RECT = "rect"
SHAPE_CIRCLE = "circle"


@dataclasses.dataclass(frozen=True)
class HighlightStyle:

	"""
	Fill, label color and optional glyph for one visual element.
	"""

	fill_color: str
	label_color: str
	shape: typing.Optional[str] = None


def palette_for (scale_type: str) -> typing.Tuple[str, ...]:

	"""Return the palette used for a scale type."""

	if scale_type == fretwheel.scales.CHROMATIC:
		return CHROMATIC_PALETTE

	if scale_type not in fretwheel.scales.SCALE_DEGREES:
		raise ValueError(f"Unknown scale type '{scale_type}'. Available: {sorted(fretwheel.scales.SCALE_DEGREES)}")

	return DIATONIC_PALETTE


class HighlightEncoder:

	"""Maps degree results to highlight styles.

	Stateless apart from the configured dark-color list, so one encoder can
	be shared by every highlighter.
	"""

	def __init__ (self, dark_colors: typing.Iterable[str] = DEFAULT_DARK_COLORS) -> None:

		"""
		Parameters:
			dark_colors: Fill colors that need white label text. Compared
				case-insensitively.

		Raises:
			ValueError: If ``dark_colors`` is a single string rather than a collection.
		"""

		if isinstance(dark_colors, str):
			raise ValueError(f"dark_colors must be a list of color names, not the string {dark_colors!r}")

		self.dark_colors: typing.FrozenSet[str] = frozenset(color.lower() for color in dark_colors)


	def color_for (
		self,
		result: fretwheel.degrees.DegreeResult,
		scale_type: str,
		neutral: str = NEUTRAL_FILL
	) -> str:

		"""Return the fill for a degree result.

		Parameters:
			result: Output of :func:`fretwheel.degrees.classify`.
			scale_type: Selects the diatonic or the chromatic palette.
			neutral: Fill for out-of-scale results (``"white"`` by default,
				``"lightyellow"`` on the minor ring).
		"""

		if not result.in_scale:
			return neutral

		palette = palette_for(scale_type)

		if not 1 <= result.degree <= len(palette):
			raise ValueError(f"Degree {result.degree} has no color in the '{scale_type}' palette")

		return palette[result.degree - 1]


	def label_color_for (self, fill_color: str) -> str:

		"""Return ``"white"`` for enumerated dark fills, ``"black"`` otherwise."""

		return LABEL_ON_DARK if fill_color.lower() in self.dark_colors else LABEL_ON_LIGHT


	@staticmethod
	def shape_for (interval: int) -> str:

		"""Alternate glyphs by semitone: ``"rect"`` on even intervals, ``"circle"`` on odd."""

		return SHAPE_RECT if interval % 2 == 0 else SHAPE_CIRCLE


	def style_for (
		self,
		result: fretwheel.degrees.DegreeResult,
		scale_type: str,
		interval: typing.Optional[int] = None,
		neutral: str = NEUTRAL_FILL
	) -> HighlightStyle:

		"""Build the full style for one element.

		``interval`` is only given in chromatic mode, where it picks the glyph.
		"""

		fill = self.color_for(result, scale_type, neutral=neutral)
		shape = self.shape_for(interval) if interval is not None else None

		return HighlightStyle(fill_color=fill, label_color=self.label_color_for(fill), shape=shape)


_default_encoder = HighlightEncoder()


def color_for (
	result: fretwheel.degrees.DegreeResult,
	scale_type: str,
	neutral: str = NEUTRAL_FILL
) -> str:

	"""Module-level shortcut using the default dark-color list."""

	return _default_encoder.color_for(result, scale_type, neutral=neutral)


def label_color_for (fill_color: str) -> str:

	"""Module-level shortcut using the default dark-color list."""

	return _default_encoder.label_color_for(fill_color)


def shape_for (interval: int) -> str:

	"""Module-level shortcut for :meth:`HighlightEncoder.shape_for`."""

	return HighlightEncoder.shape_for(interval)
