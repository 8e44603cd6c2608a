import pytest

from fileblog.utils import parse_tags, slugify


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("My First Post", "my-first-post"),
        ("  Hello, World!  ", "hello-world"),
        ("---Already--Slug---", "already-slug"),
        ("C++ > Java", "c-greater-java"),
        ("C&Go", "c-and-go"),
        ("100% Done", "100-percent-done"),
        ("Crème Brûlée", "creme-brulee"),
        ("!!!", ""),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, []),
        ("", []),
        ("python", ["python"]),
        (" a , b,, a ", ["a", "b", "a"]),
        ("Go,go", ["Go", "go"]),
        (["x ", " ", "y"], ["x", "y"]),
    ],
)
def test_parse_tags(value, expected):
    assert parse_tags(value) == expected
