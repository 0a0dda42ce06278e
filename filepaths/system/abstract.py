"""
# Backend interface descriptions and the records exchanged with backends.

# [ File Types ]

# The type strings used by &Status.type and &Entry.type.

	# /`'data'`/
		# A regular file containing bytes.
	# /`'directory'`/
		# A file containing other files.
	# /`'link'`/
		# A symbolic link; only reported when links are not followed.
	# /`'pipe'`/
		# A named pipe; also known as a FIFO.
	# /`'socket'`/
		# A unix domain socket.
	# /`'device'`/
		# A character or block device file.
	# /`'unknown'`/
		# File exists, but its type is not recognized.

# [ Elements ]
# /type_map/
	# Mapping of `S_IFMT` values to the type strings.
# /modes/
	# The stream modes recognized by &Backend.raw_open and the binary
	# mode given to the system for each.
"""
import stat
import datetime
from abc import abstractmethod
from typing import Protocol, BinaryIO, Optional
from collections.abc import Sequence

from ..context.tools import record
from ..route.grammar import Grammar

type_map = {
	stat.S_IFIFO: 'pipe',
	stat.S_IFLNK: 'link',
	stat.S_IFREG: 'data',
	stat.S_IFDIR: 'directory',
	stat.S_IFSOCK: 'socket',
	stat.S_IFBLK: 'device',
	stat.S_IFCHR: 'device',
}

modes = {
	'r': 'rb',
	'w': 'wb',
	'a': 'ab',
	'w+': 'wb+',
	'a+': 'ab+',
}

def _interpret_time(seconds:float, *, fromtimestamp=datetime.datetime.fromtimestamp):
	return fromtimestamp(seconds, datetime.timezone.utc)

@record
class Status(object):
	"""
	# File status record.

	# Produced fresh by every status query; instances are not cached or refreshed.

	# [ Properties ]
	# /type/
		# The type of the file; see the module documentation.
	# /size/
		# Number of bytes contained by the file.
	# /mode/
		# The full mode, type and permission bits, of the file.
	# /owner/
		# The user identifier of the file's owner.
	# /group/
		# The group identifier of the file.
	# /last_modified/
		# Time of last modification; UTC.
	# /last_accessed/
		# Time of last access; UTC.
	# /meta_last_modified/
		# Time of last status change; UTC.
	# /created/
		# Time of creation; UTC. Systems that do not record the creation
		# time report the time of the last status change.
	# /device/
		# Identifier of the device holding the file.
	# /inode/
		# Identifier of the file on its device.
	"""
	type: str
	size: int
	mode: int
	owner: int
	group: int
	last_modified: datetime.datetime
	last_accessed: datetime.datetime
	meta_last_modified: datetime.datetime
	created: datetime.datetime
	device: int
	inode: int

	@classmethod
	def from_system(Class, st, *, ifmt=stat.S_IFMT):
		"""
		# Construct a &Status from a status record produced by &os.stat.
		"""
		birth = getattr(st, 'st_birthtime', None)
		if birth is None:
			birth = st.st_ctime

		return Class(
			type_map.get(ifmt(st.st_mode), 'unknown'),
			st.st_size,
			st.st_mode,
			st.st_uid,
			st.st_gid,
			_interpret_time(st.st_mtime),
			_interpret_time(st.st_atime),
			_interpret_time(st.st_ctime),
			_interpret_time(birth),
			st.st_dev,
			st.st_ino,
		)

	@property
	def permissions(self) -> int:
		"""
		# The permission bits of &mode.
		"""
		return stat.S_IMODE(self.mode)

	@property
	def executable(self, mask=stat.S_IXUSR|stat.S_IXGRP|stat.S_IXOTH) -> bool:
		"""
		# Whether the data file is considered executable by anyone.

		# Extended attributes are not checked.
		"""
		return (self.mode & mask) != 0 and self.type == 'data'

	@property
	def searchable(self, mask=stat.S_IXUSR|stat.S_IXGRP|stat.S_IXOTH) -> bool:
		"""
		# Whether the directory file is considered searchable by anyone.
		"""
		return (self.mode & mask) != 0 and self.type == 'directory'

	@property
	def owner_name(self) -> Optional[str]:
		"""
		# The login name of the &owner; &None if the user database has no entry.
		"""
		from pwd import getpwuid
		try:
			return getpwuid(self.owner).pw_name
		except KeyError:
			return None

@record
class Entry(object):
	"""
	# Directory listing record.

	# [ Properties ]
	# /identifier/
		# The name of the file in its directory.
	# /type/
		# The type of the file itself; links are not followed.
	"""
	identifier: str
	type: str

class Backend(Protocol):
	"""
	# Primitive operations that a backend supplies to &.files.Path.

	# Paths given to the raw operations are &.files.Path instances tagged with the
	# backend. Failures are reported by raising the kinds defined in &..errors.
	"""
	identifier: str
	grammar: Grammar

	@abstractmethod
	def raw_status(self, path) -> Status:
		"""
		# The status of the file identified by &path with links followed.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_link_status(self, path) -> Status:
		"""
		# The status of the file identified by &path without following a final link.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_list(self, path) -> Sequence[Entry]:
		"""
		# The entries of the directory, &path, in no particular order.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_make_directory(self, path) -> None:
		"""
		# Create the directory &path; its container must exist.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_remove(self, path, directory:bool=False) -> None:
		"""
		# Remove the non-directory file at &path, or the empty directory when
		# &directory is &True.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_open(self, path, mode:str) -> BinaryIO:
		"""
		# Open a binary stream using one of the &modes.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_copy_file(self, source, destination) -> None:
		"""
		# Copy the content and permissions of the data file &source to &destination.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_rename(self, source, destination) -> bool:
		"""
		# Atomically rename &source to &destination.
		# Returns &False when the backend cannot rename between the locations.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_read_link(self, path) -> str:
		"""
		# The target text of the symbolic link at &path.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_link(self, path, target:str) -> None:
		"""
		# Create a symbolic link at &path referring to &target.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_access(self, path, properties:str) -> bool:
		"""
		# Whether the process has the access designated by &properties;
		# a combination of `'r'`, `'w'`, and `'x'`.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_working_directory(self) -> str:
		"""
		# The path text of the working directory.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_change_directory(self, path) -> None:
		"""
		# Set the working directory.
		"""
		raise NotImplementedError

	@abstractmethod
	def raw_temporary_directory(self) -> str:
		"""
		# Create a new, empty directory and return its path text.
		"""
		raise NotImplementedError
