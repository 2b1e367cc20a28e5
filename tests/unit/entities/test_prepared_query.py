import pytest
from pydantic import ValidationError

from ragprep.entities import PreparedQuery


def test_optimized_flag():
    assert PreparedQuery(original="a b", text="b", vector=[0.1]).optimized is True
    assert PreparedQuery(original="b", text="b", vector=[0.1]).optimized is False


def test_prepared_query_frozen():
    q = PreparedQuery(original="q", text="q", vector=[0.0])
    with pytest.raises(ValidationError):
        q.text = "new"
