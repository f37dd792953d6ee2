"""Circle-of-fifths side table, highlight pass and key selection.

Three rings, each in circle-of-fifths order starting from C at the top:

- major (innermost) - major keys, measured against the relative major tonic
- minor (middle) - minor keys, measured against the relative minor tonic
- diminished (outermost) - the leading-tone chord of each major key; only
  the segment on the major tonic's major 7th is lit, as degree 7

Relative keys are resolved once per pass.  In chromatic mode the resolver is
skipped and every segment is colored by its semitone distance from the root.
"""

import dataclasses
import logging
import typing

import fretwheel.degrees
import fretwheel.highlight
import fretwheel.pitch_classes
import fretwheel.relative_keys
import fretwheel.scales
import fretwheel.selection_state


logger = logging.getLogger(__name__)


RING_MAJOR = "major"
RING_MINOR = "minor"
RING_DIMINISHED = "diminished"

RINGS: typing.Tuple[str, ...] = (RING_MAJOR, RING_MINOR, RING_DIMINISHED)

MAJOR_KEYS: typing.Tuple[str, ...] = (
	"C", "G", "D", "A", "E", "B", "Gb", "Db", "Ab", "Eb", "Bb", "F"
)

MINOR_KEYS: typing.Tuple[str, ...] = (
	"Am", "Em", "Bm", "F#m", "C#m", "G#m", "D#m", "A#m", "Fm", "Cm", "Gm", "Dm"
)

DIMINISHED_KEYS: typing.Tuple[str, ...] = (
	"B°", "F#°", "C#°", "G#°", "D#°", "A#°", "F°", "C°", "G°", "D°", "A°", "E°"
)

RING_LABELS: typing.Dict[str, typing.Tuple[str, ...]] = {
	RING_MAJOR: MAJOR_KEYS,
	RING_MINOR: MINOR_KEYS,
	RING_DIMINISHED: DIMINISHED_KEYS,
}

RING_NEUTRAL_FILLS: typing.Dict[str, str] = {
	RING_MAJOR: fretwheel.highlight.NEUTRAL_FILL,
	RING_MINOR: fretwheel.highlight.MINOR_RING_NEUTRAL_FILL,
	RING_DIMINISHED: fretwheel.highlight.NEUTRAL_FILL,
}

# The diminished ring only ever shows degree 7 of the relative major.
RING_SCALE_TYPES: typing.Dict[str, str] = {
	RING_MAJOR: fretwheel.scales.MAJOR,
	RING_MINOR: fretwheel.scales.NATURAL_MINOR,
	RING_DIMINISHED: fretwheel.scales.MAJOR,
}

LEADING_TONE_DEGREE = 7

ApplyCallback = typing.Callable[[typing.Dict[str, fretwheel.highlight.HighlightStyle]], typing.Any]


@dataclasses.dataclass(frozen=True)
class WheelSegment:

	"""One arc of the wheel."""

	element_id: str
	ring: str
	position: int
	label: str
	pitch_class: fretwheel.pitch_classes.PitchClass


class CircleOfFifths:

	"""Builds the wheel side table and computes its styles for a tonal center."""

	def __init__ (self, encoder: typing.Optional[fretwheel.highlight.HighlightEncoder] = None) -> None:

		self.encoder = encoder if encoder is not None else fretwheel.highlight.HighlightEncoder()

		self.segments: typing.List[WheelSegment] = [
			WheelSegment(
				element_id = f"{ring}-{position}",
				ring = ring,
				position = position,
				label = label,
				pitch_class = fretwheel.pitch_classes.normalize(label)
			)
			for ring in RINGS
			for position, label in enumerate(RING_LABELS[ring])
		]

		self._by_id: typing.Dict[str, WheelSegment] = {segment.element_id: segment for segment in self.segments}

		self.styles: typing.Dict[str, fretwheel.highlight.HighlightStyle] = {}
		self._state: typing.Optional[fretwheel.selection_state.SelectionState] = None
		self._apply: typing.Optional[ApplyCallback] = None


	def segment (self, element_id: str) -> WheelSegment:

		"""Look up a segment by id, e.g. ``"minor-3"``."""

		if element_id not in self._by_id:
			raise KeyError(f"Unknown wheel segment: {element_id!r}")

		return self._by_id[element_id]

	def ring (self, ring: str) -> typing.List[WheelSegment]:

		"""Return the segments of one ring in wheel order."""

		if ring not in RING_LABELS:
			raise ValueError(f"Unknown ring '{ring}'. Available: {list(RINGS)}")

		return [segment for segment in self.segments if segment.ring == ring]


	def classify (
		self,
		center: fretwheel.selection_state.TonalCenter
	) -> typing.Dict[str, fretwheel.degrees.DegreeResult]:

		"""Return the degree each segment is colored for.

		Major-ring degrees are measured against the relative major tonic,
		minor-ring degrees against the relative minor tonic, and only the
		leading-tone segment of the diminished ring is in scale (as degree 7).
		"""

		if center.scale_type == fretwheel.scales.CHROMATIC:
			return {
				segment.element_id: fretwheel.degrees.classify(segment.pitch_class, center.root, fretwheel.scales.CHROMATIC)
				for segment in self.segments
			}

		keys = fretwheel.relative_keys.relative_keys(center.root, center.scale_type)
		leading_tone = fretwheel.relative_keys.leading_tone(keys.major_tonic)

		results: typing.Dict[str, fretwheel.degrees.DegreeResult] = {}

		for segment in self.segments:

			if segment.ring == RING_MAJOR:
				results[segment.element_id] = fretwheel.degrees.classify(segment.pitch_class, keys.major_tonic, fretwheel.scales.MAJOR)

			elif segment.ring == RING_MINOR:
				results[segment.element_id] = fretwheel.degrees.classify(segment.pitch_class, keys.minor_tonic, fretwheel.scales.NATURAL_MINOR)

			elif segment.pitch_class == leading_tone:
				results[segment.element_id] = fretwheel.degrees.in_scale(LEADING_TONE_DEGREE)

			else:
				results[segment.element_id] = fretwheel.degrees.OUT_OF_SCALE

		return results


	def highlight (
		self,
		center: fretwheel.selection_state.TonalCenter
	) -> typing.Dict[str, fretwheel.highlight.HighlightStyle]:

		"""Return the style of every segment for a tonal center."""

		chromatic = center.scale_type == fretwheel.scales.CHROMATIC
		results = self.classify(center)
		styles: typing.Dict[str, fretwheel.highlight.HighlightStyle] = {}

		for segment in self.segments:

			result = results[segment.element_id]

			if chromatic:
				semitones = fretwheel.pitch_classes.interval(segment.pitch_class, center.root)
				styles[segment.element_id] = self.encoder.style_for(result, fretwheel.scales.CHROMATIC, interval=semitones)

			else:
				styles[segment.element_id] = self.encoder.style_for(
					result,
					RING_SCALE_TYPES[segment.ring],
					neutral = RING_NEUTRAL_FILLS[segment.ring]
				)

		logger.debug(f"Circle of fifths highlight pass for {center}")

		return styles


	def select (self, element_id: str, state: fretwheel.selection_state.SelectionState) -> None:

		"""Apply a click on a segment to the selection state.

		A major segment selects that major key and a minor segment that minor
		key.  A diminished segment selects the major key it is the leading-tone
		chord of (one semitone up).
		"""

		segment = self.segment(element_id)

		if segment.ring == RING_MAJOR:
			state.set(segment.pitch_class, fretwheel.scales.MAJOR)

		elif segment.ring == RING_MINOR:
			state.set(segment.pitch_class, fretwheel.scales.NATURAL_MINOR)

		else:
			major_tonic = fretwheel.pitch_classes.transpose(segment.pitch_class, -fretwheel.relative_keys.LEADING_TONE_OFFSET)
			state.set(major_tonic, fretwheel.scales.MAJOR)


	def bind (
		self,
		state: fretwheel.selection_state.SelectionState,
		apply: typing.Optional[ApplyCallback] = None
	) -> None:

		"""Recompute ``styles`` on every selection change, starting with the current one."""

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
