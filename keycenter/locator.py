"""Key-center location on the Circle of Fifths.

:func:`locate` takes a detected chord and returns the circle position of its
tonic: on the major ring for major (and every other non-minor) quality, on the
minor ring for minor qualities. Comparison happens in the host's sharps-only
vocabulary, with circle spellings (including enharmonic twins) normalised
through :func:`keycenter.notes.normalise`.

The locator never raises for bad input. A chord that is missing, malformed or
has an unknown root gives :data:`NOT_FOUND`. The scan is traced on this
module's logger at DEBUG level.
"""

import dataclasses
import logging
import typing

import keycenter.chords
import keycenter.circle
import keycenter.notes


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Found:

	"""A located key center at circle position ``index`` (0-11)."""

	index: int

	found: typing.ClassVar[bool] = True


	def __bool__ (self) -> bool:

		return True


@dataclasses.dataclass(frozen=True)
class NotFound:

	"""No circle position matches the chord."""

	found: typing.ClassVar[bool] = False


	def __bool__ (self) -> bool:

		return False


LocateResult = typing.Union[Found, NotFound]

NOT_FOUND = NotFound()


@dataclasses.dataclass(frozen=True)
class ActiveKeys:

	"""
	The circle segments to highlight around a key center.

	Attributes:
		center: Circle position of the key center, or ``None`` if not found.
		major: Segment keys (``"major-C"``…) to highlight on the major ring.
		minor: Segment keys (``"minor-Am"``…) to highlight on the minor ring.
	"""

	center: typing.Optional[int] = None
	major: typing.Tuple[str, ...] = ()
	minor: typing.Tuple[str, ...] = ()


def _matches (entry: keycenter.circle.CircleEntry, root: str, is_minor: bool) -> bool:

	"""Return whether any spelling of the entry's tonic on the chosen ring is ``root``."""

	for tonic in entry.tonics(is_minor):

		app_note = keycenter.notes.normalise(tonic)
		logger.debug(f"Checking {tonic} -> {app_note} vs {root}")

		if app_note == root:
			return True

	return False


def locate (chord: typing.Any, normalise_query: bool = True) -> LocateResult:

	"""Find the circle position of a detected chord's key center.

	Parameters:
		chord: A mapping with a ``"name"`` key or an object with a ``name``
			attribute, e.g. ``{"name": "D# Minor"}``.
		normalise_query: Re-spell the chord root in sharps before comparing,
			so ``"Gb Major"`` and ``"Bb Minor"`` are found. When ``False`` the
			root must already be a sharps-only label.

	Returns:
		``Found(index)`` for the first matching position, otherwise
		:data:`NOT_FOUND`.

	Example:
		```python
		locate({"name": "C Major"})      # → Found(index=0)
		locate({"name": "C Minor"})      # → Found(index=9)
		locate({"name": "D# Minor"})     # → Found(index=6)
		locate({"name": "G Dominant 7"}) # → Found(index=1)
		locate({})                       # → NOT_FOUND
		```
	"""

	parsed = keycenter.chords.parse_chord(chord)

	if parsed is None:
		logger.debug(f"Not a chord: {chord!r}")
		return NOT_FOUND

	root = keycenter.notes.normalise(parsed.root) if normalise_query else parsed.root

	logger.debug(f"Root: {root}, Quality: {parsed.quality}, isMinor: {parsed.is_minor}")

	for index, entry in enumerate(keycenter.circle.CIRCLE_OF_FIFTHS):
		if _matches(entry, root, parsed.is_minor):
			logger.debug(f"Found index: {index}")
			return Found(index)

	logger.debug(f"No circle position for root {root!r}")

	return NOT_FOUND


def locate_index (chord: typing.Any, normalise_query: bool = True) -> int:

	"""
	Return the circle position from :func:`locate`, or ``-1`` when not found.
	"""

	result = locate(chord, normalise_query=normalise_query)

	if isinstance(result, Found):
		return result.index

	return -1


def active_keys (chord: typing.Any, span: int = 1, normalise_query: bool = True) -> ActiveKeys:

	"""Return the segments to highlight for a chord's key center.

	The key center and the ``span`` positions either side of it are
	highlighted on the ring matching the chord's quality. With the default
	span a C major chord lights up F, C and G: the key and its
	subdominant and dominant neighbours.

	Parameters:
		chord: The detected chord, as for :func:`locate`.
		span: Neighbours on each side of the center (0-5).
		normalise_query: Passed to :func:`locate`.

	Returns:
		An :class:`ActiveKeys`; empty when the chord has no key center.

	Raises:
		ValueError: If ``span`` is out of range.

	Example:
		```python
		active_keys({"name": "C Major"})
		# → ActiveKeys(center=0, major=("major-F", "major-C", "major-G"), minor=())
		```
	"""

	if not 0 <= span <= keycenter.circle.CIRCLE_SIZE // 2 - 1:
		raise ValueError(f"Neighbour span {span!r} out of range. Expected 0-{keycenter.circle.CIRCLE_SIZE // 2 - 1}.")

	result = locate(chord, normalise_query=normalise_query)

	if not isinstance(result, Found):
		return ActiveKeys()

	parsed = keycenter.chords.parse_chord(chord)
	is_minor = parsed is not None and parsed.is_minor

	segments = tuple(
		keycenter.circle.segment_key(index, is_minor=is_minor)
		for index in keycenter.circle.neighbours(result.index, span)
	)

	if is_minor:
		return ActiveKeys(center=result.index, minor=segments)

	return ActiveKeys(center=result.index, major=segments)
