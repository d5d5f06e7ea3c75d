import os

import pytest

from standoff.io import read_document

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def ann_path():
    """ annotations of the sample document """
    return os.path.join(DATA_DIR, "sample.ann")


@pytest.fixture
def txt_path():
    """ text of the sample document """
    return os.path.join(DATA_DIR, "sample.txt")


@pytest.fixture
def document(ann_path, txt_path):
    return read_document(ann_path, txt_path=txt_path)


@pytest.fixture
def scenario_lines():
    return [
        "T1\tProtein 10 15\tBRCA1",
        "T2\tProtein 0 5\tTP53",
        "E1\tBinding:T1 Theme:T2",
    ]
