"""
# Check the ordering and the state management of &.traversal.Walk.
"""
from ... import errors
from .. import files
from .. import traversal as module

def tree(test):
	"""
	# Construct `{bar/qux/quux.tar.gz, foo/baz.txt, fred/plugh}` in a temporary directory.
	"""
	td = test.exits.enter_context(files.Path.fs_tmpdir())
	(td/'foo'/'baz.txt').fs_init(b'')
	(td/'bar'/'qux'/'quux.tar.gz').fs_init(b'')
	(td/'fred'/'plugh').fs_mkdir(recursive=True)
	return td

def names(td, paths):
	return [str(x.relative(td)) for x in paths]

def test_fs_walk_top_down(test):
	td = tree(test)
	l = list(td.fs_walk())
	test/names(td, l) == [
		'bar', 'bar/qux', 'bar/qux/quux.tar.gz',
		'foo', 'foo/baz.txt',
		'fred', 'fred/plugh',
	]
	test/list(td.fs_walk('top-down')) == l

	# Directories before their contents.
	for i, x in enumerate(l):
		for y in l[:i]:
			test/(x in list(y.parents())) == False

def test_fs_walk_bottom_up(test):
	td = tree(test)
	l = list(td.fs_walk('bottom-up'))
	test/names(td, l) == [
		'bar/qux/quux.tar.gz', 'bar/qux', 'bar',
		'foo/baz.txt', 'foo',
		'fred/plugh', 'fred',
	]

	# Contents before their directories.
	for i, x in enumerate(l):
		for y in l[i+1:]:
			test/(x in list(y.parents())) == False

def test_fs_walk_complete(test):
	td = tree(test)
	top = list(td.fs_walk('top-down'))
	bottom = list(td.fs_walk('bottom-up'))
	test/len(top) == 7
	test/len(set(top)) == 7
	test/set(top) == set(bottom)
	test/(td in top) == False

def test_fs_walk_restart(test):
	td = tree(test)
	i = td.fs_walk()
	first = next(i)
	test/first == td/'bar'

	# A new walk starts from the beginning.
	test/next(td.fs_walk()) == first
	test/next(i) == td/'bar'/'qux'

def test_fs_walk_links(test):
	td = tree(test)
	(td/'link').fs_link(td/'bar')

	l = list(td.fs_walk())
	test/l.count(td/'link') == 1
	test/(td/'link'/'qux' in l) == False

	w = dict(module.Walk(td))
	test/w[td/'link'] == 'link'
	test/w[td/'bar'] == 'directory'
	test/w[td/'foo'/'baz.txt'] == 'data'

def test_fs_walk_empty(test):
	td = test.exits.enter_context(files.Path.fs_tmpdir())
	test/list(td.fs_walk()) == []
	test/list(td.fs_walk('bottom-up')) == []

def test_fs_walk_errors(test):
	td = tree(test)
	test/errors.NotFoundError ^ (lambda: list((td/'void').fs_walk()))
	test/errors.NotADirectoryError ^ (lambda: list((td/'foo'/'baz.txt').fs_walk()))
	test/ValueError ^ (lambda: module.Walk(td, 'sideways'))

def test_Walk_terminates_on_failure(test):
	td = tree(test)
	w = module.Walk(td)
	test/next(w) == (td/'bar', 'directory')

	# The listing of bar fails on the next step.
	(td/'bar').fs_remove(recursive=True)
	test/errors.NotFoundError ^ (lambda: next(w))
	test/StopIteration ^ (lambda: next(w))
	test/repr(w).__contains__('exhausted') == True

def test_Walk_lazy(test):
	td = tree(test)
	w = module.Walk(td, 'bottom-up')
	test/repr(w).__contains__('bottom-up') == True

	# Listing does not occur until iteration.
	(td/'late').fs_store(b'')
	test/((td/'late', 'data') in list(w)) == True

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
