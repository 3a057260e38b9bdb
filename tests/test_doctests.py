import doctest
import importlib

import pytest
from structlog.testing import capture_logs


@pytest.mark.parametrize('module_name', [
    'csv_extra.numeric',
    'csv_extra.encoding.num_list',
    'csv_extra.encoding.num_matrix',
    'csv_extra.encoding.image_size',
    'csv_extra.encoding.lat_lon',
])
def test_module_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    # keep log lines out of the compared output
    with capture_logs():
        failed, attempted = doctest.testmod(module)
    assert attempted > 0
    assert failed == 0
