"""
# Error kinds raised by path parsing and filesystem operations.

# Every failure surfaced by &.route and &.system is an instance of &PathError.
# The kinds that correspond to a system error number are also instances of the
# matching &OSError subclass so that callers may continue to use the builtin
# exception hierarchy.

# [ Elements ]
# /codes/
	# Mapping of system error numbers to the kind raised for them.
	# `EXDEV`, an operation spanning devices, is raised as &CrossBackendError, and
	# `EPERM` and `EROFS` as &PermissionError. Numbers not present, `EINVAL`,
	# `ENAMETOOLONG`, and `ENOSPC` for instance, are raised as a plain &PathError
	# carrying the number in &PathError.code and the system's description.
"""
import builtins
import contextlib
import errno

class PathError(Exception):
	"""
	# Base class of the error kinds.

	# [ Properties ]
	# /fs_path/
		# The path, or the text that failed to parse, that the operation was performed on.
	# /fs_operation/
		# The name of the operation that failed.
	# /fs_description/
		# Short description of the kind of failure.
	"""
	code = 0
	description = "path operation failed"

	def __init__(self, path, operation=None, *, code=None, description=None):
		self.fs_path = path
		self.fs_operation = operation
		self.fs_description = description or self.description
		if code is not None:
			self.code = code

		super().__init__(self.code, self.fs_description, str(path))

	def __str__(self):
		if self.fs_operation:
			return f"{self.fs_description}: {self.fs_operation} {self.fs_path!s}"
		return f"{self.fs_description}: {self.fs_path!s}"

class ParseError(PathError, ValueError):
	description = "malformed path"

class NotFoundError(PathError, builtins.FileNotFoundError):
	code = errno.ENOENT
	description = "file does not exist"

class AlreadyExistsError(PathError, builtins.FileExistsError):
	code = errno.EEXIST
	description = "file already exists"

class NotADirectoryError(PathError, builtins.NotADirectoryError):
	code = errno.ENOTDIR
	description = "not a directory"

class NotAFileError(PathError, builtins.IsADirectoryError):
	code = errno.EISDIR
	description = "not a data file"

class NotEmptyError(PathError, builtins.OSError):
	code = errno.ENOTEMPTY
	description = "directory is not empty"

class PermissionError(PathError, builtins.PermissionError):
	code = errno.EACCES
	description = "permission denied"

class CycleError(PathError, builtins.OSError):
	code = errno.ELOOP
	description = "symbolic link cycle"

class CrossBackendError(PathError, builtins.OSError):
	code = errno.EXDEV
	description = "paths belong to different devices or backends"

	def __init__(self, path, operation=None, *, target=None, **kw):
		self.fs_target = target
		super().__init__(path, operation, **kw)

codes = {
	errno.ENOENT: NotFoundError,
	errno.EEXIST: AlreadyExistsError,
	errno.ENOTDIR: NotADirectoryError,
	errno.EISDIR: NotAFileError,
	errno.ENOTEMPTY: NotEmptyError,
	errno.EACCES: PermissionError,
	errno.EPERM: PermissionError,
	errno.EROFS: PermissionError,
	errno.ELOOP: CycleError,
	errno.EXDEV: CrossBackendError,
}

def from_system(error:OSError, path, operation:str) -> PathError:
	"""
	# Construct the &PathError kind corresponding to the system &error.
	"""
	Kind = codes.get(error.errno)
	if Kind is None:
		return PathError(path, operation, code=error.errno, description=error.strerror)
	return Kind(path, operation, code=error.errno)

@contextlib.contextmanager
def translation(path, operation:str):
	"""
	# Convert &OSError instances raised inside the context into &PathError kinds.

	# Errors that are already &PathError instances pass through unchanged and
	# the original system error is retained as the `__cause__`.
	"""
	try:
		yield path
	except PathError:
		raise
	except OSError as err:
		raise from_system(err, path, operation) from err
