"""
# Textual path grammars.

# A &Grammar describes the separator and anchor conventions of a backend and
# converts between path text and the `(drive, root, points)` triple held by
# &.types.Selector instances. Parsing never consults a filesystem.

# [ Elements ]
# /posix/
	# Single root marker, `/` separated.
# /windows/
	# Drive letter or UNC share followed by an optional `\\` root marker;
	# `/` is accepted as an alternate separator.
# /system/
	# The grammar of the running operating system.
"""
import os
from collections.abc import Sequence

from ..context.tools import record
from .. import errors

@record
class Grammar(object):
	"""
	# Separator and anchor conventions of a path namespace.

	# [ Properties ]
	# /identifier/
		# Name of the grammar.
	# /separator/
		# The separator used when serializing.
	# /alternates/
		# Additional characters accepted as separators when parsing.
	# /drives/
		# Whether drive letters and UNC shares are recognized as anchors.
	# /prohibited/
		# Characters that make a path text structurally invalid.
	# /reserved/
		# Characters that may not appear in segments as they would be read as
		# part of an anchor when the serialized text is parsed.
	"""
	identifier: str
	separator: str
	alternates: str = ''
	drives: bool = False
	prohibited: str = '\x00'
	reserved: str = ''

	def _drive(self, text:str) -> tuple[str, str]:
		# Split the drive from &text; &text has been separator normalized.
		s = self.separator

		if text[:2] == s+s and text[2:3] not in ('', s):
			# UNC; the share is required to form a drive.
			server, _, rest = text[2:].partition(s)
			share, _, rest = rest.partition(s)
			if share:
				return (s + s + server + s + share, s + rest)
		elif text[1:2] == ':' and text[:1].isalpha():
			return (text[:2], text[2:])

		return ('', text)

	def parse(self, text:str) -> tuple[str, str, tuple[str, ...]]:
		"""
		# Split &text into its drive, root marker, and segments.

		# Consecutive separators are collapsed and trailing separators discarded.
		# `.` and `..` segments are preserved.

		# [ Exceptions ]
		# /&errors.ParseError/
			# &text contains a prohibited character, or a segment contains a reserved character.
		"""
		for x in self.prohibited:
			if x in text:
				raise errors.ParseError(text, 'parse')

		source = text
		s = self.separator
		for x in self.alternates:
			text = text.replace(x, s)

		drive = ''
		if self.drives:
			drive, text = self._drive(text)

		root = s if text[:1] == s else ''
		points = tuple(x for x in text.split(s) if x)

		for x in self.reserved:
			for p in points:
				if x in p:
					raise errors.ParseError(source, 'parse')

		return (drive, root, points)

	def segments(self, text:str) -> tuple[str, ...]:
		"""
		# The segments of &text with any anchor discarded.
		"""
		return self.parse(text)[2]

	def serialize(self, drive:str, root:str, points:Sequence[str]) -> str:
		"""
		# Construct the path text of the given fields.
		"""
		return drive + root + self.separator.join(points)

posix = Grammar('posix', '/')
windows = Grammar('windows', '\\', alternates='/', drives=True, reserved=':')

if os.name == 'nt':
	system = windows
else:
	system = posix
