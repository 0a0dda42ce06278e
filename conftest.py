"""
# Provide the &filepaths.test.types.Test instance given to test functions.
"""
import pytest
from filepaths.test import types

@pytest.fixture
def test(request):
	t = types.Test(request.node.name, request.function)
	with t.exits:
		yield t
