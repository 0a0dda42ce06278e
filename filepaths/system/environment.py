"""
# Environment variables consulted by path constructors.

# Variables are read when the interfaces are called; changes made to &os.environ
# by the process are observed.

# [ Elements ]
# /backend_variable/
	# Name of the variable designating the default backend tag.
"""
import os

backend_variable = 'FILEPATHS_BACKEND'

def backend(default:str='local') -> str:
	"""
	# The backend tag used by constructors when none is given.
	"""
	return os.environ.get(backend_variable) or default

def home() -> str:
	"""
	# The path text of the user's home directory; (system/environ)`HOME` when defined.
	"""
	return os.environ.get('HOME') or os.path.expanduser('~')
