import pytest
from reqparse.examples import EXAMPLES, check_examples
from reqparse.models import parse_request

@pytest.mark.parametrize("name,raw,expected", EXAMPLES, ids=[name for name, _, _ in EXAMPLES])
def test_example_parses_to_expected(name, raw, expected):
    assert parse_request(raw) == expected

def test_check_examples_reports_nothing():
    assert check_examples() == []

def test_check_examples_reports_mismatch(monkeypatch):
    import reqparse.examples as examples

    name, raw, expected = examples.EXAMPLES[0]
    monkeypatch.setattr(examples, "EXAMPLES", [(name, raw.replace("GET", "HEAD"), expected)])
    assert examples.check_examples() == [name]
