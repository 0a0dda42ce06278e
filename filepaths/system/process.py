"""
# Working directory interfaces.

# The working directory is process global state; &fs_chdir serializes changes made
# through it so that nested and concurrent uses restore the directory that they replaced.
"""
import contextlib
import threading
from typing import Optional

from . import backends
from . import environment
from .files import Path

_directory_lock = threading.RLock()

def fs_pwd(backend:Optional[str]=None) -> Path:
	"""
	# Construct a &Path to the working directory of &backend.
	"""
	backend = backend or environment.backend()
	return Path.from_string(backends.select(backend).raw_working_directory(), backend)

@contextlib.contextmanager
def fs_chdir(directory:Path):
	"""
	# Set the working directory for the duration of the context.

	# The previous working directory is restored on exit even when the
	# context raises. Returns the new working directory on entrance.

	# [ Exceptions ]
	# /&..errors.NotFoundError/
		# The &directory does not exist.
	# /&..errors.NotADirectoryError/
		# The &directory is not a directory.
	"""
	system = directory.implementation

	with _directory_lock:
		previous = fs_pwd(directory.backend)
		system.raw_change_directory(directory)
		try:
			yield fs_pwd(directory.backend)
		finally:
			system.raw_change_directory(previous)
