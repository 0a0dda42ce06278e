"""
# Filesystem path values, path algebra, and the operations that they drive.

# [ Packages ]
# /route/
	# Pure path values: parsing, serialization, and algebra. No I/O.
# /system/
	# Backend tagged paths and the local filesystem backend.
# /context/
	# Function tools shared by the other packages.
# /test/
	# Contention primitives used by the tests.
"""
