"""
# Check the working directory interfaces.
"""
import os
import threading

from ... import errors
from .. import files
from .. import process as module

def test_fs_pwd(test):
	pwd = module.fs_pwd()
	test.isinstance(pwd, files.Path)
	test/pwd.fullpath == os.getcwd()
	test/pwd.backend == 'local'
	test/module.fs_pwd('local') == pwd

def test_fs_chdir(test):
	td = files.Path.from_string(os.path.realpath(
		test.exits.enter_context(files.Path.fs_tmpdir()).fullpath
	))
	d = (td/'sub').fs_mkdir()
	previous = module.fs_pwd()

	with module.fs_chdir(d) as wd:
		test/wd == d
		test/module.fs_pwd() == d
		test/files.Path.from_path('file') == d/'file'

		# Nested.
		with module.fs_chdir(td):
			test/module.fs_pwd() == td
			(files.Path.from_string('sub')/'relative').fs_store(b'x')
		test/module.fs_pwd() == d
		test/files.Path.from_string('relative').fs_load() == b'x'

	test/module.fs_pwd() == previous

def test_fs_chdir_restored_on_error(test):
	td = test.exits.enter_context(files.Path.fs_tmpdir())
	previous = module.fs_pwd()

	def fail():
		with module.fs_chdir(td):
			raise RuntimeError("abort")

	test/RuntimeError ^ fail
	test/module.fs_pwd() == previous

def test_fs_chdir_invalid(test):
	td = test.exits.enter_context(files.Path.fs_tmpdir())
	f = (td/'file').fs_store(b'')
	previous = module.fs_pwd()

	test/errors.NotFoundError ^ (lambda: module.fs_chdir(td/'void').__enter__())
	test/errors.NotADirectoryError ^ (lambda: module.fs_chdir(f).__enter__())
	test/module.fs_pwd() == previous

def test_fs_chdir_exclusive(test):
	"""
	# Scoped changes made by other threads wait for the active scope to exit.
	"""
	td = files.Path.from_string(os.path.realpath(
		test.exits.enter_context(files.Path.fs_tmpdir()).fullpath
	))
	a = (td/'a').fs_mkdir()
	b = (td/'b').fs_mkdir()
	observed = []

	def other():
		with module.fs_chdir(b):
			observed.append(module.fs_pwd())

	with module.fs_chdir(a):
		t = threading.Thread(target=other)
		t.start()
		observed.append(module.fs_pwd())
	t.join()

	test/observed == [a, b]

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
