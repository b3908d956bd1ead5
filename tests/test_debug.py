from contestlib.debug import debug, format_value


def test_scalars():
    assert format_value("abc") == '"abc"'
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(42) == "42"


def test_pair_and_list():
    assert format_value((1, "a")) == '(1, "a")'
    assert format_value([1, 2]) == "{1, 2, }"
    assert format_value([]) == "{}"


def test_nested_and_mapping():
    assert format_value([[1], [2, 3]]) == "{{1, }, {2, 3, }, }"
    assert format_value({"k": True}) == '{("k", true), }'


def test_debug_writes_to_stderr(capsys):
    debug(1, "x", [True])
    captured = capsys.readouterr()
    assert captured.err == ' 1 "x" {true, }\n'
    assert captured.out == ""