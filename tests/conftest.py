import json

import pytest


@pytest.fixture
def tree_file(tmpdir):
    f = tmpdir.join('tree.json')
    f.write(json.dumps([1, [2, 3], 4]))
    return f
