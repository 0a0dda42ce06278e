"""
# Implementation of the route base class.

# The primary class, &AnchoredSequence, holds an anchor, divided into a drive and
# a root marker, and the sequence of segments that follow it.

# Direct use of this class is likely inappropriate; &.types.Selector provides
# the grammar bound interfaces that construct and serialize routes.
"""
from collections.abc import Iterator, Sequence
from typing import Optional
import functools

from ..context.tools import consistency
from . import relative_resolution

@functools.total_ordering
class AnchoredSequence(object):
	"""
	# Route implementation class managing the path as an anchored sequence of segments.

	# Equality, hashing, and ordering are defined by the &drive, &root, and &points
	# alone. Subclasses that carry additional state must reconstruct it in &_rebuild.
	"""
	__slots__ = ('drive', 'root', 'points',)

	drive: str
	root: str
	points: Sequence[str]

	def __init__(self, drive:str, root:str, points:Sequence[str]):
		self.drive = drive
		self.root = root
		self.points = tuple(points)

	def _rebuild(self, points, drive=None, root=None):
		# Construct an instance of the same type and state with the given fields.
		return self.__class__(
			self.drive if drive is None else drive,
			self.root if root is None else root,
			points,
		)

	def _extend(self, *points:str):
		# Append pre-validated segments; no parsing is performed.
		if not points:
			return self
		return self._rebuild(self.points + points)

	@property
	def anchor(self) -> str:
		"""
		# The drive and root marker; empty for relative paths.
		"""
		return self.drive + self.root

	def _key(self):
		return (self.drive, self.root, self.points)

	def __hash__(self) -> int:
		return hash(self._key())

	def __eq__(self, operand):
		if isinstance(operand, AnchoredSequence):
			return self._key() == operand._key()
		return NotImplemented

	def __lt__(self, operand):
		if isinstance(operand, AnchoredSequence):
			return self._key() < operand._key()
		return NotImplemented

	def __reduce__(self):
		return (self.__class__, (self.drive, self.root, self.points))

	# Sequence Interfaces

	def __len__(self):
		return len(self.points)

	def __iter__(self) -> Iterator[str]:
		return iter(self.points)

	def __getitem__(self, req):
		return self.points[req]

	# Route Interfaces

	@property
	def identifier(self) -> Optional[str]:
		"""
		# The final segment of the route; &None when there are no segments.
		"""
		if self.points:
			return self.points[-1]
		return None

	@property
	def container(self):
		"""
		# The route without its final segment.

		# Routes without segments are their own container.
		"""
		if not self.points:
			return self
		return self._rebuild(self.points[:-1])

	def __mul__(self, replacement:str):
		if not self.points:
			return self._extend(replacement)

		return self._rebuild(self.points[:-1] + (replacement,))

	def __pow__(self, strip:int):
		if strip < 0:
			strip = len(self) + strip

		return self._rebuild(self.points[:max(len(self.points) - strip, 0)])

	def __invert__(self):
		x = self
		yield x
		for i in range(len(x)):
			x = x.container
			yield x

	def __pos__(self):
		points = relative_resolution(self.points, anchored=bool(self.root))
		return self._rebuild(points)

	def correlate(self, target) -> tuple[int, Sequence[str]]:
		"""
		# The relative positioning of &target with respect to &self.
		# Provides the necessary information to form a relative path to &target from &self.

		# Returns the number of steps to ascend and the sequence of segments to apply in
		# order to arrive at &target. Both routes are compared in their normalized form.
		"""
		source = (+self).points
		destination = (+target).points

		cl = consistency(source, destination)
		return (len(source) - cl, destination[cl:])
