"""The selected root note and scale type, with change notification.

A ``SelectionState`` is created by the application and handed to each
highlighter; nothing reads it through a global.  Every setter replaces the
whole ``TonalCenter`` and then calls listeners synchronously, in the order
they registered, before returning.  A setter called from inside a listener
queues its notifications behind the ones already being delivered, so every
listener sees the changes in the order they happened and ends on the latest.

Events:

- ``"root_note"`` - called with the new ``TonalCenter`` after ``set_root_note``
- ``"scale_type"`` - called with the new ``TonalCenter`` after ``set_scale_type``
- ``"change"`` - called with the new ``TonalCenter`` after any setter
"""

import dataclasses
import inspect
import logging
import typing

import fretwheel.pitch_classes
import fretwheel.scales


logger = logging.getLogger(__name__)


CallbackType = typing.Callable[..., typing.Any]

EVENT_ROOT_NOTE = "root_note"
EVENT_SCALE_TYPE = "scale_type"
EVENT_CHANGE = "change"

EVENT_NAMES: typing.Tuple[str, ...] = (EVENT_ROOT_NOTE, EVENT_SCALE_TYPE, EVENT_CHANGE)

DEFAULT_ROOT = "C"
DEFAULT_SCALE_TYPE = fretwheel.scales.MAJOR


@dataclasses.dataclass(frozen=True)
class TonalCenter:

	"""
	The (root, scale type) pair every highlight pass is computed from.
	"""

	root: fretwheel.pitch_classes.PitchClass
	scale_type: str

	def __str__ (self) -> str:

		return f"{self.root.name} {self.scale_type}"


class SelectionState:

	"""Owns the current ``TonalCenter`` and notifies listeners of changes."""

	def __init__ (
		self,
		root: typing.Union[str, fretwheel.pitch_classes.PitchClass] = DEFAULT_ROOT,
		scale_type: str = DEFAULT_SCALE_TYPE
	) -> None:

		"""
		Parameters:
			root: Initial root note spelling (default ``"C"``).
			scale_type: Initial scale type name or alias (default ``"major"``).
		"""

		self._center = TonalCenter(
			root = fretwheel.pitch_classes.normalize(root),
			scale_type = fretwheel.scales.scale_type_from_name(scale_type)
		)

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {name: [] for name in EVENT_NAMES}

		self._pending: typing.List[typing.Tuple[str, TonalCenter]] = []
		self._emitting = False


	@property
	def snapshot (self) -> TonalCenter:

		"""The current tonal center."""

		return self._center

	@property
	def root_note (self) -> fretwheel.pitch_classes.PitchClass:

		return self._center.root

	@property
	def scale_type (self) -> str:

		return self._center.scale_type


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		if event_name not in self._listeners:
			raise ValueError(f"Unknown event {event_name!r}. Available: {list(EVENT_NAMES)}")

		if inspect.iscoroutinefunction(callback):
			raise ValueError("Selection listeners must be synchronous")

		self._listeners[event_name].append(callback)

	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if event_name not in self._listeners or callback not in self._listeners[event_name]:
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def subscribe (self, callback: CallbackType) -> None:

		"""Register for every change and receive the current snapshot immediately."""

		self.on(EVENT_CHANGE, callback)
		callback(self._center)

	def unsubscribe (self, callback: CallbackType) -> None:

		"""Undo :meth:`subscribe`."""

		self.off(EVENT_CHANGE, callback)


	def set_root_note (self, spelling: typing.Union[str, fretwheel.pitch_classes.PitchClass]) -> None:

		"""Select a new root note.

		Decorated spellings from the wheel (``"F#m"``, ``"B°"``) are accepted
		and normalized.  Raises ``UnknownPitchClass`` without notifying
		anyone when the spelling is not recognised.
		"""

		root = fretwheel.pitch_classes.normalize(spelling)
		self._replace(TonalCenter(root=root, scale_type=self._center.scale_type), EVENT_ROOT_NOTE)

	def set_scale_type (self, name: str) -> None:

		"""Select a new scale type by name or alias."""

		scale_type = fretwheel.scales.scale_type_from_name(name)
		self._replace(TonalCenter(root=self._center.root, scale_type=scale_type), EVENT_SCALE_TYPE)

	def set (self, root: typing.Union[str, fretwheel.pitch_classes.PitchClass], scale_type: str) -> None:

		"""Replace root and scale type together with a single ``"change"`` notification."""

		center = TonalCenter(
			root = fretwheel.pitch_classes.normalize(root),
			scale_type = fretwheel.scales.scale_type_from_name(scale_type)
		)

		self._replace(center, None)


	def _replace (self, center: TonalCenter, event_name: typing.Optional[str]) -> None:

		self._center = center
		logger.info(f"Selection: {center}")

		if event_name is not None:
			self._pending.append((event_name, center))

		self._pending.append((EVENT_CHANGE, center))

		# A setter called from a listener queues behind the pass in progress.
		if self._emitting:
			return

		self._emitting = True

		try:
			while self._pending:
				queued_event, queued_center = self._pending.pop(0)
				self._emit(queued_event, queued_center)

		finally:
			self._pending.clear()
			self._emitting = False

	def _emit (self, event_name: str, center: TonalCenter) -> None:

		# Copy so a listener may unregister itself while being called.
		for callback in list(self._listeners[event_name]):
			callback(center)
