from chartcheck.validators import contains_block, selector_line, split_info


def test_selector_line_echoes_values_verbatim():
    assert selector_line("Service", "v1", "web", "prod") == (
        "Kind = Service, apiVersion = v1, Name = web, Namespace = prod"
    )


def test_contains_block():
    line = selector_line("Service", "v1", "web", "prod")

    assert contains_block(3, line, negative=False) == [
        "DocumentIndex:\t3",
        "Expected to contain document:",
        "\tKind = Service, apiVersion = v1, Name = web, Namespace = prod",
    ]


def test_not_contains_block():
    line = selector_line("Service", "v1", "web", "prod")

    assert contains_block(0, line, negative=True)[1] == "Expected NOT to contain document:"


def test_empty_trailing_field_leaves_no_trailing_space():
    line = selector_line("Service", "v1", "", "")

    assert contains_block(0, line, negative=False)[2] == (
        "\tKind = Service, apiVersion = v1, Name = , Namespace ="
    )


def test_split_info_indents_multiline_replacements():
    lines = split_info("\nHeader:\t{index}\n{0}\n", 2, "first\nsecond\n")

    assert lines == ["Header:\t2", "\tfirst", "\tsecond"]


def test_split_info_keeps_braces_in_replacements():
    lines = split_info("Value:\n{0}", 0, "{name}")

    assert lines == ["Value:", "\t{name}"]
