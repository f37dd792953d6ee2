"""Fretboard side table and highlight pass.

Each fretted position is an entry ``(element_id, string_index, fret,
pitch_class)``.  A renderer keeps its own drawing handles keyed by
``element_id`` and applies the styles returned by :meth:`Fretboard.highlight`.

In major and minor modes every position is colored by its degree from the
selected root.  In chromatic mode every position is in scale, and the glyph
alternates between ``"rect"`` and ``"circle"`` by semitone.
"""

import dataclasses
import logging
import typing

import fretwheel.degrees
import fretwheel.highlight
import fretwheel.pitch_classes
import fretwheel.scales
import fretwheel.selection_state


logger = logging.getLogger(__name__)


# High string first, as drawn top to bottom.
STANDARD_TUNING: typing.Tuple[str, ...] = ("E", "B", "G", "D", "A", "E")
DEFAULT_FRETS = 24

ApplyCallback = typing.Callable[[typing.Dict[str, fretwheel.highlight.HighlightStyle]], typing.Any]


@dataclasses.dataclass(frozen=True)
class FretPosition:

	"""One note position on the neck."""

	element_id: str
	string_index: int
	fret: int
	pitch_class: fretwheel.pitch_classes.PitchClass


class Fretboard:

	"""Builds the fretboard side table and computes its styles for a tonal center."""

	def __init__ (
		self,
		tuning: typing.Sequence[str] = STANDARD_TUNING,
		frets: int = DEFAULT_FRETS,
		encoder: typing.Optional[fretwheel.highlight.HighlightEncoder] = None
	) -> None:

		"""
		Parameters:
			tuning: Open-string spellings, high string first.
			frets: Number of frets; fret 0 is the open string.
			encoder: Shared highlight encoder (a default one is created if omitted).

		Raises:
			UnknownPitchClass: If a tuning spelling is not recognised.
			ValueError: If ``tuning`` is empty or ``frets`` is negative.
		"""

		if not tuning:
			raise ValueError("Tuning must name at least one string")

		if frets < 0:
			raise ValueError("Fret count cannot be negative")

		self.open_strings = [fretwheel.pitch_classes.normalize(name) for name in tuning]
		self.frets = frets
		self.encoder = encoder if encoder is not None else fretwheel.highlight.HighlightEncoder()

		self.positions: typing.List[FretPosition] = []

		for fret in range(frets + 1):
			for string_index, open_pc in enumerate(self.open_strings):
				self.positions.append(FretPosition(
					element_id = f"{string_index}-{fret}",
					string_index = string_index,
					fret = fret,
					pitch_class = fretwheel.pitch_classes.transpose(open_pc, fret)
				))

		self.styles: typing.Dict[str, fretwheel.highlight.HighlightStyle] = {}
		self._state: typing.Optional[fretwheel.selection_state.SelectionState] = None
		self._apply: typing.Optional[ApplyCallback] = None


	def position (self, string_index: int, fret: int) -> FretPosition:

		"""Look up a position by string and fret."""

		if not 0 <= string_index < len(self.open_strings) or not 0 <= fret <= self.frets:
			raise KeyError(f"No position at string {string_index}, fret {fret}")

		return self.positions[fret * len(self.open_strings) + string_index]


	def classify (
		self,
		center: fretwheel.selection_state.TonalCenter
	) -> typing.Dict[str, fretwheel.degrees.DegreeResult]:

		"""Return the degree of every position, measured from the selected root."""

		# Twelve lookups per pass; positions sharing a pitch class share a result.
		by_pitch_class = fretwheel.degrees.classify_all(center.root, center.scale_type)

		return {pos.element_id: by_pitch_class[pos.pitch_class] for pos in self.positions}


	def highlight (
		self,
		center: fretwheel.selection_state.TonalCenter
	) -> typing.Dict[str, fretwheel.highlight.HighlightStyle]:

		"""Return the style of every position for a tonal center."""

		chromatic = center.scale_type == fretwheel.scales.CHROMATIC
		results = self.classify(center)
		styles: typing.Dict[str, fretwheel.highlight.HighlightStyle] = {}

		for pos in self.positions:

			result = results[pos.element_id]

			if chromatic:
				semitones = fretwheel.pitch_classes.interval(pos.pitch_class, center.root)
				styles[pos.element_id] = self.encoder.style_for(result, center.scale_type, interval=semitones)

			else:
				styles[pos.element_id] = self.encoder.style_for(result, center.scale_type)

		logger.debug(f"Fretboard highlight pass for {center}: {len(styles)} positions")

		return styles


	def legend (self, scale_type: str) -> typing.List[typing.Tuple[str, str]]:

		"""Return ``(label, color)`` pairs for each degree of a scale type."""

		palette = fretwheel.highlight.palette_for(scale_type)

		return [
			(fretwheel.scales.degree_label(degree, scale_type), palette[degree - 1])
			for degree, _ in fretwheel.scales.degrees_of(scale_type)
		]


	def bind (
		self,
		state: fretwheel.selection_state.SelectionState,
		apply: typing.Optional[ApplyCallback] = None
	) -> None:

		"""Recompute ``styles`` on every selection change, starting with the current one.

		Parameters:
			state: The selection state to follow.
			apply: Called with the new styles after each pass.
		"""

		if self._state is not None:
			self.unbind()

		self._state = state
		self._apply = apply
		state.subscribe(self._on_change)

	def unbind (self) -> None:

		"""Stop following the bound selection state."""

		if self._state is None:
			return

		self._state.unsubscribe(self._on_change)
		self._state = None
		self._apply = None


	def _on_change (self, center: fretwheel.selection_state.TonalCenter) -> None:

		self.styles = self.highlight(center)

		if self._apply is not None:
			self._apply(self.styles)
