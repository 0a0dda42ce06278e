"""
# Check the parsing and serialization of the path grammars.
"""
from .. import grammar as module
from ... import errors

def test_posix_parse(test):
	p = module.posix.parse
	test/p('') == ('', '', ())
	test/p('/') == ('', '/', ())
	test/p('/usr/lib') == ('', '/', ('usr', 'lib'))
	test/p('a/b/') == ('', '', ('a', 'b'))
	test/p('a//b') == ('', '', ('a', 'b'))
	test/p('./a/../b') == ('', '', ('.', 'a', '..', 'b'))
	test/p('.') == ('', '', ('.',))

	# No drives or alternates.
	test/p('C:\\x') == ('', '', ('C:\\x',))

def test_posix_serialize(test):
	s = module.posix.serialize
	test/s('', '', ()) == ''
	test/s('', '/', ()) == '/'
	test/s('', '/', ('usr', 'lib')) == '/usr/lib'
	test/s('', '', ('a', 'b')) == 'a/b'

def test_windows_parse(test):
	p = module.windows.parse
	test/p('C:\\Users\\x') == ('C:', '\\', ('Users', 'x'))
	test/p('C:/Users/x') == ('C:', '\\', ('Users', 'x'))
	test/p('C:x') == ('C:', '', ('x',))
	test/p('\\x') == ('', '\\', ('x',))
	test/p('x\\y') == ('', '', ('x', 'y'))

def test_windows_unc(test):
	p = module.windows.parse
	test/p('\\\\server\\share\\dir') == ('\\\\server\\share', '\\', ('dir',))
	test/p('//server/share') == ('\\\\server\\share', '\\', ())

	# Incomplete share; the leading separators designate the root.
	test/p('\\\\server') == ('', '\\', ('server',))

def test_round_trip(test):
	samples = [
		(module.posix, ['', '/', '/a/b', 'a/b', '.', '..', '/a/./../b']),
		(module.windows, ['', 'C:', 'C:\\', 'C:\\a\\b', 'a\\b', '\\a', '\\\\srv\\share\\a']),
	]

	for g, texts in samples:
		for text in texts:
			fields = g.parse(text)
			test/g.serialize(*fields) == text
			test/g.parse(g.serialize(*fields)) == fields

def test_segments(test):
	test/module.posix.segments('/a/b') == ('a', 'b')
	test/module.windows.segments('C:\\a/b') == ('a', 'b')
	test/module.posix.segments('') == ()

def test_prohibited(test):
	e = test/errors.ParseError ^ (lambda: module.posix.parse('a\x00b'))
	test/e.fs_path == 'a\x00b'
	test.isinstance(e, ValueError)
	test/ValueError ^ (lambda: module.windows.parse('\x00'))

def test_windows_reserved(test):
	p = module.windows.parse

	# Segments that would be read as drives when serialized.
	for text in ['x\\C:\\y', 'x\\C:foo', 'C:\\a\\b:c']:
		e = test/errors.ParseError ^ (lambda: p(text))
		test/e.fs_path == text

	test/p('C:') == ('C:', '', ())
	test/module.posix.parse('x/C:/y') == ('', '', ('x', 'C:', 'y'))

def test_system(test):
	test/(module.system in (module.posix, module.windows)) == True

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
