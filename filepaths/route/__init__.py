"""
# Path value data structures and their algebra.

# Routes are immutable; every operation produces a new instance and none of
# them consult a filesystem.
"""
import typing

def relative_resolution(
		points:typing.Iterable[str],
		anchored:bool=False,
		delta=({'.':0, '..':1}).get
	) -> list[str]:
	"""
	# Resolve the relative accessors, `.` and `..`, within &points.

	# A `..` removes the preceding segment when one exists that is not itself a `..`.
	# Otherwise, the `..` is retained for relative paths and discarded for
	# &anchored paths as there is nothing above the root.
	"""
	r = []
	add = r.append

	for x in points:
		a = delta(x)
		if a is None:
			add(x)
		elif a:
			if r and r[-1] != '..':
				del r[-1]
			elif not anchored:
				add(x)

	return r
