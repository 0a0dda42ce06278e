"""
# Depth-first directory traversal.

# &Walk is built only on the backend's listing primitive, &.abstract.Backend.raw_list,
# whose entries carry the type of each file so that no additional status
# queries are needed to decide whether to descend.

# [ Elements ]
# /orders/
	# The traversal orders accepted by &Walk.
	# /`'top-down'`/
		# Pre-order; a directory is produced before its contents.
	# /`'bottom-up'`/
		# Post-order; the contents of a directory are produced before the directory.
"""
from collections.abc import Iterator

orders = ('top-down', 'bottom-up')

def identify(entry) -> str:
	"""
	# Sort key of listing entries.
	"""
	return entry.identifier

class Walk(Iterator):
	"""
	# Single-pass iterator producing `(path, type)` pairs for the files beneath a directory.

	# The directory given to the constructor is not produced. Entries of a directory
	# are visited in the order of their identifiers. Symbolic links are produced with
	# the type `'link'` and are never descended into.

	# The iterator holds its state explicitly as a stack of frames. Each frame is a list
	# containing the directory, its sorted entries or &None if the directory has not been
	# listed yet, and the position of the next entry. Listing failures are raised from
	# &__next__ and terminate the iteration; a new &Walk restarts the traversal.
	"""
	__slots__ = ('order', '_stack',)

	def __init__(self, directory, order:str='top-down'):
		if order not in orders:
			raise ValueError("unrecognized traversal order %r" %(order,))

		self.order = order
		self._stack = [[directory, None, 0]]

	def __repr__(self):
		if self._stack:
			return "<%s %r %s>" %(self.__class__.__name__, self._stack[0][0], self.order)
		return "<%s exhausted %s>" %(self.__class__.__name__, self.order)

	def _expand(self, frame):
		directory = frame[0]
		entries = sorted(directory.implementation.raw_list(directory), key=identify)
		frame[1] = entries
		return entries

	def __next__(self):
		stack = self._stack
		topdown = (self.order == 'top-down')

		try:
			while stack:
				frame = stack[-1]
				directory, entries, position = frame

				if entries is None:
					entries = self._expand(frame)

				if position < len(entries):
					frame[2] = position + 1
					entry = entries[position]
					subject = directory._extend(entry.identifier)

					if entry.type == 'directory':
						stack.append([subject, None, 0])
						if not topdown:
							# Produced when the frame is exhausted.
							continue

					return (subject, entry.type)

				del stack[-1]
				if not topdown and stack:
					# The initial directory is not produced.
					return (directory, 'directory')
		except Exception:
			stack.clear()
			raise

		raise StopIteration
