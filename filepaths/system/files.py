"""
# Filesystem interfaces and data structures.

# &Path extends &..route.types.Selector with a backend tag. Status queries,
# mutations, and traversal are dispatched to the backend that the tag selects;
# see &.backends.

# Working directory related interfaces are provided in &.process.

# [ Elements ]
# /root/
	# The &Path to the root directory of the local filesystem.
"""
import contextlib
import logging
from collections.abc import Iterator
from typing import Optional, BinaryIO

from .. import errors
from ..route.types import Selector
from . import abstract
from . import backends
from . import environment
from . import traversal

logger = logging.getLogger(__name__)

# The kinds that identify a path as being absent.
_void = (errors.NotFoundError, errors.NotADirectoryError)

class Path(Selector):
	"""
	# Path implementation providing file system controls.

	# The &backend tag is not considered by comparisons; paths with equal anchors
	# and segments are equal regardless of the backend that they select.
	"""
	__slots__ = ('backend',)
	Status = abstract.Status

	def __init__(self, drive:str, root:str, points, backend:str='local'):
		super().__init__(drive, root, points)
		self.backend = backend

	def _rebuild(self, points, drive=None, root=None):
		return self.__class__(
			self.drive if drive is None else drive,
			self.root if root is None else root,
			points,
			self.backend,
		)

	def __reduce__(self):
		return (self.__class__, (self.drive, self.root, self.points, self.backend))

	@property
	def implementation(self) -> abstract.Backend:
		"""
		# The backend selected by the &backend tag.
		"""
		return backends.select(self.backend)

	@property
	def grammar(self):
		return self.implementation.grammar

	@classmethod
	def from_string(Class, text:str, backend:Optional[str]=None):
		"""
		# Parse &text using the grammar of &backend.

		# When &backend is not given, the tag designated by &.environment.backend is used.
		"""
		backend = backend or environment.backend()
		return Class(*backends.select(backend).grammar.parse(text), backend)

	@classmethod
	def from_path(Class, text:str, backend:Optional[str]=None):
		"""
		# Construct an absolute &Path from the given absolute or relative path
		# text; relative paths are joined onto the working directory.

		# This is usually the most appropriate way to instantiate a &Path
		# from user input.
		"""
		return Class.from_string(text, backend).absolute()

	@classmethod
	def home(Class, backend:Optional[str]=None):
		"""
		# The &Path to the home directory defined by the environment.
		"""
		return Class.from_string(environment.home(), backend)

	@classmethod
	@contextlib.contextmanager
	def fs_tmpdir(Class, backend:Optional[str]=None):
		"""
		# Create a temporary directory at a new path using a context manager.

		# A &Path to the temporary directory is returned on entrance,
		# and that same path is destroyed on exit.
		"""
		backend = backend or environment.backend()
		d = Class.from_string(backends.select(backend).raw_temporary_directory(), backend)
		try:
			yield d
		finally:
			d.fs_remove(recursive=True, force=True)

	def __repr__(self):
		return "(%s@%r)" %(self.backend, self.fullpath)

	def __fspath__(self) -> str:
		return self.fullpath

	def working(self):
		"""
		# The working directory of the backend.
		"""
		return self.from_string(self.implementation.raw_working_directory(), self.backend)

	def _correlated(self, operand, operation):
		# The backend shared by &self and &operand.
		if self.backend != operand.backend:
			raise errors.CrossBackendError(self, operation, target=operand)
		return self.implementation

	def _location(self):
		# The path with the links of its containers resolved; a final link is not followed.
		if not self.points or self.identifier in ('.', '..'):
			return self.fs_real()
		return self.container.fs_real()._extend(self.identifier)

	def _overlap(self, destination) -> Optional[str]:
		"""
		# Identify whether replacing &destination would destroy &self.

		# Returns `'identical'` when both paths arrive at the same file, `'container'`
		# when &destination contains &self or its link target, and &None otherwise.
		"""
		try:
			target = destination._location()
		except _void:
			return None

		sources = [self._location()]
		try:
			sources.append(self.fs_real())
		except _void + (errors.CycleError,):
			# Broken or cyclic links are moved as links.
			pass

		n = len(target.points)
		for s in sources:
			if s == target:
				return 'identical'
			if s.anchor == target.anchor and len(s.points) > n and s.points[:n] == target.points:
				return 'container'

		return None

	def _fs_replaceable(self, destination, force:bool, operation:str) -> bool:
		# Whether &destination should be written; &False when it is already &self.
		overlap = self._overlap(destination)
		if overlap is None:
			return True

		if overlap == 'container' or not force:
			raise errors.AlreadyExistsError(destination, operation)
		return False

	# Status Queries

	def fs_status(self) -> abstract.Status:
		"""
		# The status of the file with all links followed.
		"""
		return self.implementation.raw_status(self)

	def fs_link_status(self) -> abstract.Status:
		"""
		# The status of the file without following a final symbolic link.
		"""
		return self.implementation.raw_link_status(self)

	def fs_type(self) -> str:
		"""
		# The type of file the path points to.

		# [ Returns ]
		# - `'directory'`
		# - `'data'`
		# - `'pipe'`
		# - `'socket'`
		# - `'device'`
		# - `'unknown'`
		# - `'void'`

		# If no file is present at the path or a broken link is present, `'void'` will be returned.
		"""
		try:
			return self.fs_status().type
		except errors.NotFoundError:
			return 'void'

	def _status_or_void(self) -> Optional[abstract.Status]:
		try:
			return self.fs_status()
		except _void:
			return None

	def exists(self) -> bool:
		"""
		# Query the filesystem and return whether or not the file exists.

		# A path to a symbolic link *will* return &False if the target does not exist.
		"""
		return self._status_or_void() is not None

	def is_directory(self) -> bool:
		st = self._status_or_void()
		return st is not None and st.type == 'directory'

	def is_file(self) -> bool:
		"""
		# Whether the path identifies a regular data file.
		"""
		st = self._status_or_void()
		return st is not None and st.type == 'data'

	def is_link(self) -> bool:
		try:
			return self.fs_link_status().type == 'link'
		except _void:
			return False

	def _fs_access(self, properties:str) -> bool:
		if self._status_or_void() is None:
			return False
		return self.implementation.raw_access(self, properties)

	def is_readable(self) -> bool:
		return self._fs_access('r')

	def is_writable(self) -> bool:
		return self._fs_access('w')

	def is_executable(self) -> bool:
		"""
		# Whether the process may execute the file; for directories, whether it may search it.
		"""
		return self._fs_access('x')

	def fs_size(self) -> int:
		"""
		# Return the size of the file as depicted by &fs_status.
		"""
		return self.fs_status().size

	def fs_real(self):
		"""
		# Resolve every symbolic link in the path producing an absolute, normalized &Path.

		# [ Exceptions ]
		# /&errors.NotFoundError/
			# A segment of the path does not exist.
		# /&errors.CycleError/
			# A symbolic link refers to itself, directly or indirectly.
		"""
		system = self.implementation
		path = self.absolute()

		resolved = path._rebuild(())
		pending = list(reversed(path.points))
		# Link path to its resolution; &None while the resolution is in progress.
		seen = {}

		while pending:
			x = pending.pop()

			if not isinstance(x, str):
				# Marker; the link, &x, has been resolved.
				seen[x] = resolved
				continue
			elif x == '.':
				continue
			elif x == '..':
				resolved = resolved.container
				continue

			candidate = resolved._extend(x)
			if system.raw_link_status(candidate).type != 'link':
				resolved = candidate
				continue

			if candidate in seen:
				if seen[candidate] is None:
					raise errors.CycleError(self, 'resolve')
				resolved = seen[candidate]
				continue

			seen[candidate] = None
			target = self.from_string(system.raw_read_link(candidate), self.backend)
			if target.is_absolute():
				resolved = target._rebuild(())

			pending.append(candidate)
			pending.extend(reversed(target.points))

		return resolved

	# Mutations

	def _fs_make_directory(self, exist_ok:bool):
		try:
			self.implementation.raw_make_directory(self)
		except errors.AlreadyExistsError:
			# Possibly created concurrently.
			if not exist_ok or self.fs_type() != 'directory':
				raise

	def fs_mkdir(self, *, recursive:bool=False, exist_ok:bool=False):
		"""
		# Create the directory identified by &self.

		# [ Parameters ]
		# /recursive/
			# Create the leading directories as needed.
			# Otherwise, &errors.NotFoundError is raised when the container is absent.
		# /exist_ok/
			# Do nothing when the directory already exists.
			# A file of another type is still an &errors.AlreadyExistsError.

		# [ Returns ]
		# The path instance, &self.
		"""
		typ = self.fs_type()
		if typ != 'void':
			if exist_ok and typ == 'directory':
				return self
			raise errors.AlreadyExistsError(self, 'mkdir')

		if recursive:
			routes = []
			for p in self.parents():
				t = p.fs_type()
				if t == 'void':
					routes.append(p)
				elif t == 'directory':
					break
				else:
					raise errors.NotADirectoryError(p, 'mkdir')

			# Create leading directories.
			for x in reversed(routes):
				x._fs_make_directory(True)

		self._fs_make_directory(exist_ok)
		return self

	def fs_remove(self, *, recursive:bool=False, force:bool=False):
		"""
		# Remove the file identified by &self.

		# Symbolic links are removed, not their targets.

		# [ Parameters ]
		# /recursive/
			# Remove directories and their contents.
			# Otherwise, only empty directories may be removed and
			# &errors.NotEmptyError is raised for populated directories.
		# /force/
			# Do nothing when the file does not exist.
		"""
		system = self.implementation

		try:
			st = system.raw_link_status(self)
		except _void:
			if force:
				return self
			raise

		if st.type != 'directory':
			system.raw_remove(self)
		elif not recursive:
			system.raw_remove(self, directory=True)
		else:
			logger.debug("removing tree %s", self)
			for path, typ in traversal.Walk(self, 'bottom-up'):
				try:
					system.raw_remove(path, directory=(typ == 'directory'))
				except errors.NotFoundError:
					if not force:
						raise
			system.raw_remove(self, directory=True)

		return self

	def _fs_clear(self, force:bool, operation:str):
		# Prepare &self to be the destination of a copy or move.
		try:
			self.fs_link_status()
		except errors.NotFoundError:
			return

		if not force:
			raise errors.AlreadyExistsError(self, operation)
		self.fs_remove(recursive=True, force=True)

	def fs_copy(self, destination, *, force:bool=False):
		"""
		# Copy the file or directory tree identified by &self to &destination.

		# A symbolic link given as &self is followed; links inside a directory tree
		# are copied as links. Pipes, sockets, and devices inside a tree are not copied.

		# [ Parameters ]
		# /force/
			# Replace &destination when it exists.
			# Otherwise, &errors.AlreadyExistsError is raised.
			# A &destination that arrives at &self, through links or otherwise, is left
			# as is, and one that contains &self is always refused.

		# [ Returns ]
		# The &destination.
		"""
		system = self._correlated(destination, 'copy')
		st = self.fs_status()

		if not self._fs_replaceable(destination, force, 'copy'):
			return destination
		destination._fs_clear(force, 'copy')

		if st.type != 'directory':
			system.raw_copy_file(self, destination)
			return destination

		logger.debug("copying tree %s to %s", self, destination)
		# Collected before creating the destination in case it is inside &self.
		entries = list(traversal.Walk(self, 'top-down'))
		system.raw_make_directory(destination)

		n = len(self.points)
		for path, typ in entries:
			target = destination._extend(*path.points[n:])

			if typ == 'directory':
				system.raw_make_directory(target)
			elif typ == 'link':
				system.raw_link(target, system.raw_read_link(path))
			elif typ == 'data':
				system.raw_copy_file(path, target)
			else:
				logger.debug("not copying %s file %s", typ, path)

		return destination

	def fs_move(self, destination, *, force:bool=False):
		"""
		# Move the file identified by &self to &destination.

		# Renames when the backend is able to; otherwise, the file is copied
		# and then removed. A symbolic link is moved as a link.

		# [ Parameters ]
		# /force/
			# Replace &destination when it exists.
			# Otherwise, &errors.AlreadyExistsError is raised.
			# A &destination that arrives at &self, through links or otherwise, is left
			# as is, and one that contains &self is always refused.

		# [ Returns ]
		# The &destination.
		"""
		system = self._correlated(destination, 'move')
		st = self.fs_link_status()

		if not self._fs_replaceable(destination, force, 'move'):
			return destination
		destination._fs_clear(force, 'move')
		if system.raw_rename(self, destination):
			return destination

		logger.debug("moving %s to %s by copying", self, destination)
		if st.type == 'link':
			system.raw_link(destination, system.raw_read_link(self))
		else:
			self.fs_copy(destination)
		self.fs_remove(recursive=True)

		return destination

	def fs_link(self, target, *, relative:bool=False):
		"""
		# Create a symbolic link at &self referring to &target.

		# [ Parameters ]
		# /relative/
			# Store the target relative to the directory containing &self.
			# Otherwise, the absolute form of &target is stored.
		"""
		system = self._correlated(target, 'link')

		if relative:
			text = str(target.relative(self.container)) or '.'
		else:
			text = str(target.absolute())

		system.raw_link(self, text)
		return self

	@contextlib.contextmanager
	def fs_open(self, mode:str='r') -> Iterator[BinaryIO]:
		"""
		# Open a binary stream to the file identified by &self.
		# The stream is closed when the context exits regardless of the outcome.

		# [ Parameters ]
		# /mode/
			# One of `'r'`, `'w'`, `'a'`, `'w+'`, or `'a+'`.
			# Writes made through append modes always occur at the end of the file.
		"""
		if mode not in abstract.modes:
			raise ValueError("unrecognized stream mode %r" %(mode,))

		with self.implementation.raw_open(self, mode) as f:
			yield f

	def fs_load(self) -> bytes:
		"""
		# Retrieve the entire contents of the file.
		"""
		with self.fs_open('r') as f:
			return f.read()

	def fs_store(self, data:bytes):
		"""
		# Replace the contents of the file with &data; creates the file when absent.
		"""
		with self.fs_open('w') as f:
			f.write(data)
		return self

	def fs_init(self, data:Optional[bytes]=None):
		"""
		# Create and initialize a data file at the path using the given &data.

		# If &data is &None, no write operation will occur for pre-existing files.
		# If &data is not &None, the bytes will be written regardless.

		# Returns the path instance, &self.
		# Leading directories will be created as needed.
		"""
		self.container.fs_mkdir(recursive=True, exist_ok=True)

		if data is None:
			with self.fs_open('a'):
				pass
		else:
			self.fs_store(data)

		return self

	def get_text_content(self, encoding:str='utf-8') -> str:
		"""
		# Retrieve the entire contents of the file as a &str.
		"""
		return self.fs_load().decode(encoding)

	def set_text_content(self, string:str, encoding:str='utf-8'):
		"""
		# Modify the regular file identified by &self to contain the given &string.
		"""
		return self.fs_store(string.encode(encoding))

	# Traversal

	def fs_list(self) -> list['Path']:
		"""
		# The files contained by the directory identified by &self, ordered by identifier.
		"""
		return sorted(self._extend(x.identifier) for x in self.implementation.raw_list(self))

	def fs_walk(self, order:str='top-down') -> Iterator['Path']:
		"""
		# Generate the paths of all the files beneath the directory, &self.

		# [ Parameters ]
		# /order/
			# `'top-down'` to produce directories before their contents, or
			# `'bottom-up'` to produce them after.

		# See &traversal.Walk for the details of the iteration.
		"""
		return (path for path, typ in traversal.Walk(self, order))

root = Path.from_string(backends.select('local').grammar.separator, 'local')
