#: Project name.
name = 'filepaths'
abstract = 'polymorphic filesystem path values and operations'
icon = '🗂'

#: IRI based project identity. (project homepage)
identity = 'https://github.com/filepaths/filepaths'

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
