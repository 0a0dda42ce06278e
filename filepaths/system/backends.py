"""
# Registry of the backends that &.files.Path tags select.

# The `'local'` backend, &.local.Local, is always present.
"""
from . import abstract
from . import local

registry: dict[str, abstract.Backend] = {
	'local': local.Local(),
}

def register(identifier:str, backend:abstract.Backend) -> abstract.Backend:
	"""
	# Associate &backend with the tag &identifier.
	"""
	registry[identifier] = backend
	return backend

def select(identifier:str) -> abstract.Backend:
	"""
	# Retrieve the backend associated with &identifier.

	# [ Exceptions ]
	# /&LookupError/
		# No backend is registered with the tag.
	"""
	try:
		return registry[identifier]
	except KeyError:
		raise LookupError("no backend registered as %r" %(identifier,)) from None
