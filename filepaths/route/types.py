"""
# Grammar bound route classes.

# &Selector is the path value: an anchored sequence of segments that is parsed from
# and serialized to text by a &.grammar.Grammar. None of the interfaces defined here
# perform I/O; &..system.files.Path extends &Selector with a backend tag.
"""
from collections.abc import Iterator
from typing import Optional

from . import core
from . import grammar as grammars

class Selector(core.AnchoredSequence):
	"""
	# Route domain base class.

	# Subclasses provide access methods to a resource identified
	# by the sequence of segments contained within the selector instance.
	"""
	__slots__ = ()

	grammar = grammars.posix

	@classmethod
	def from_string(Class, text:str):
		"""
		# Parse &text using the class' grammar.
		"""
		return Class(*Class.grammar.parse(text))

	def __str__(self):
		return self.fullpath

	def __repr__(self):
		return "(%s@%r)" %(self.grammar.identifier, self.fullpath)

	@property
	def fullpath(self) -> str:
		"""
		# The serialized form of the route.
		"""
		return self.grammar.serialize(self.drive, self.root, self.points)

	def components(self) -> tuple[str, ...]:
		"""
		# The segments of the route preceded by the anchor when one is present.
		"""
		if self.drive or self.root:
			return (self.anchor,) + self.points
		return self.points

	def is_absolute(self) -> bool:
		"""
		# Whether the route has a root marker.
		"""
		return bool(self.root)

	def is_empty(self) -> bool:
		"""
		# Whether the route has neither an anchor nor segments.
		"""
		return not (self.drive or self.root or self.points)

	# Joins

	def _segments(self, part) -> tuple[str, ...]:
		if isinstance(part, core.AnchoredSequence):
			if isinstance(part, Selector) and part.grammar is not self.grammar:
				# Segments of a foreign grammar may hold this grammar's separators.
				segments = self.grammar.segments
				return tuple(x for point in part.points for x in segments(point))
			return part.points
		return self.grammar.segments(part)

	def join(self, *parts):
		"""
		# Construct a new route by appending the segments of each of the &parts.

		# Strings are split on the grammar's separators. The anchors of the &parts
		# are not retained; only their segments are appended.
		"""
		points = self.points
		for x in parts:
			points += self._segments(x)

		if len(points) == len(self.points):
			return self
		return self._rebuild(points)

	def __truediv__(self, part):
		if isinstance(part, (str, core.AnchoredSequence)):
			return self.join(part)
		return NotImplemented

	# Ancestry

	def parent(self):
		"""
		# Alias to &container.
		"""
		return self.container

	def has_parent(self) -> bool:
		"""
		# Whether the route has segments that its &container does not.
		"""
		return bool(self.points)

	def parents(self) -> Iterator['Selector']:
		"""
		# Generate the ancestors of the route, nearest first.
		# The last route produced has no segments.
		"""
		x = self
		while x.points:
			x = x.container
			yield x

	# Segment Decomposition

	@property
	def basename(self) -> str:
		"""
		# The final segment; an empty string when there are no segments.
		"""
		return self.identifier or ''

	def _split_extensions(self) -> tuple[str, list[str]]:
		name = self.basename
		body = name.lstrip('.')
		lead = name[:len(name) - len(body)]

		stem, *suffixes = body.split('.')
		return (lead + stem, [x for x in suffixes if x])

	@property
	def filename(self) -> str:
		"""
		# The final segment without any extensions.
		"""
		return self._split_extensions()[0]

	@property
	def extensions(self) -> list[str]:
		"""
		# The dot separated suffixes of the final segment in order of appearance.
		# Leading dots do not start an extension.
		"""
		return self._split_extensions()[1]

	@property
	def extension(self) -> str:
		"""
		# The last dot-extension of the final segment.
		# An empty string if there is none.
		"""
		e = self.extensions
		return e[-1] if e else ''

	def suffix(self, appended:str):
		"""
		# Modify the final segment by appending &appended.
		"""
		return self * (self.basename + appended)
	suffix_filename = suffix

	def prefix(self, prefix:str):
		"""
		# Modify the final segment by prefixing &prefix.
		"""
		return self * (prefix + self.basename)
	prefix_filename = prefix

	# Normalization and Correlation

	normalize = core.AnchoredSequence.__pos__

	def working(self) -> 'Selector':
		"""
		# The route that relative routes are made absolute against.
		# For pure selectors, this is the root.
		"""
		return self.__class__(self.drive, self.grammar.separator, ())

	def absolute(self, directory:Optional['Selector']=None):
		"""
		# Join the route onto &directory, or &working when not given,
		# unless it is already absolute.
		"""
		if self.is_absolute():
			return self

		if directory is None:
			directory = self.working()
		elif not directory.is_absolute():
			directory = directory.absolute()

		return directory._extend(*self.points)

	def relative(self, base:'Selector'):
		"""
		# Construct the relative route that arrives at &self when joined to &base.

		# Both routes are compared in their normalized, absolute forms.
		# When their anchors differ no relative route exists and the normalized,
		# absolute form of &self is returned.
		"""
		target = self.absolute()
		base = base.absolute()

		if target.anchor != base.anchor:
			return +target

		ascent, segment = base.correlate(target)
		return target._rebuild(('..',) * ascent + tuple(segment), drive='', root='')
