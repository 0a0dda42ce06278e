"""
# Local filesystem backend.

# Implements &.abstract.Backend using &os and &shutil. Relative paths are
# interpreted by the system against the process' working directory; the empty
# path designates the working directory itself.
"""
import os
import stat
import shutil
import tempfile
import functools
import logging

from .. import errors
from ..route import grammar
from . import abstract

logger = logging.getLogger(__name__)

def _entry_type(de, *, ifmt=stat.S_IFMT, type_map=abstract.type_map) -> str:
	# Avoids the stat call for the common types.
	if de.is_symlink():
		return 'link'
	elif de.is_dir(follow_symlinks=False):
		return 'directory'
	elif de.is_file(follow_symlinks=False):
		return 'data'

	return type_map.get(ifmt(de.stat(follow_symlinks=False).st_mode), 'unknown')

class Local(object):
	"""
	# Backend of the filesystem local to the process.
	"""
	identifier = 'local'
	grammar = grammar.system

	_fs_access = functools.partial(
		os.access,
		effective_ids=(os.access in os.supports_effective_ids)
	)
	_fs_access_map = {
		'r': os.R_OK,
		'w': os.W_OK,
		'x': os.X_OK,
	}

	def __repr__(self):
		return "%s.%s()" %(__name__, self.__class__.__name__)

	@staticmethod
	def native(path) -> str:
		"""
		# The system path string of &path.
		"""
		return path.fullpath or os.curdir

	def raw_status(self, path, *, stat=os.stat) -> abstract.Status:
		with errors.translation(path, 'status'):
			return abstract.Status.from_system(stat(self.native(path)))

	def raw_link_status(self, path, *, lstat=os.lstat) -> abstract.Status:
		with errors.translation(path, 'link-status'):
			return abstract.Status.from_system(lstat(self.native(path)))

	def raw_list(self, path, *, scandir=os.scandir) -> list[abstract.Entry]:
		Entry = abstract.Entry

		with errors.translation(path, 'list'):
			with scandir(self.native(path)) as scan:
				return [Entry(de.name, _entry_type(de)) for de in scan]

	def raw_make_directory(self, path, *, mkdir=os.mkdir):
		logger.debug("mkdir %s", path)
		with errors.translation(path, 'mkdir'):
			mkdir(self.native(path))

	def raw_remove(self, path, directory=False, *, remove=os.remove, rmdir=os.rmdir):
		logger.debug("remove %s", path)
		with errors.translation(path, 'remove'):
			if directory:
				rmdir(self.native(path))
			else:
				remove(self.native(path))

	def raw_open(self, path, mode):
		with errors.translation(path, 'open'):
			return open(self.native(path), abstract.modes[mode])

	def raw_copy_file(self, source, destination, *, copy=shutil.copy):
		logger.debug("copy %s to %s", source, destination)
		with errors.translation(source, 'copy'):
			copy(self.native(source), self.native(destination), follow_symlinks=True)

	def raw_rename(self, source, destination, *, rename=os.replace) -> bool:
		logger.debug("rename %s to %s", source, destination)
		try:
			with errors.translation(source, 'rename'):
				rename(self.native(source), self.native(destination))
		except errors.CrossBackendError:
			# Distinct devices; caller falls back to copying.
			return False

		return True

	def raw_read_link(self, path, *, readlink=os.readlink) -> str:
		with errors.translation(path, 'read-link'):
			return readlink(self.native(path))

	def raw_link(self, path, target, *, symlink=os.symlink):
		logger.debug("link %s to %s", path, target)
		with errors.translation(path, 'link'):
			symlink(target, self.native(path))

	def raw_access(self, path, properties) -> bool:
		check = 0
		for x in properties:
			check |= self._fs_access_map[x]

		return self._fs_access(self.native(path), check)

	def raw_working_directory(self, *, getcwd=os.getcwd) -> str:
		with errors.translation(os.curdir, 'working-directory'):
			return getcwd()

	def raw_change_directory(self, path, *, chdir=os.chdir):
		logger.debug("chdir %s", path)
		with errors.translation(path, 'chdir'):
			chdir(self.native(path))

	def raw_temporary_directory(self, *, mkdtemp=tempfile.mkdtemp) -> str:
		with errors.translation(tempfile.gettempdir(), 'temporary-directory'):
			return mkdtemp()
