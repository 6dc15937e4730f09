from ordcache.projection import normalize_projection, project


def test_key_aliases():
    for alias in ("k", "ke", "key", "keys", "KEY", "Keys"):
        assert normalize_projection(alias) == "key"


def test_both_aliases():
    for alias in ("both", "entries", "items", "b"):
        assert normalize_projection(alias) == "both"


def test_value_fallback():
    assert normalize_projection("value") == "value"
    assert normalize_projection("v") == "value"
    assert normalize_projection(None) == "value"
    assert normalize_projection("5[fs$") == "value"


def test_project():
    entries = {"a": 1, "b": 2}
    assert project(entries, "key") == ["a", "b"]
    assert project(entries) == [1, 2]
    assert project(entries, "both") == [("a", 1), ("b", 2)]
