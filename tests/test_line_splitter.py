from srtconv.line_splitter import split_lines


def test_drops_blank_and_whitespace_only_lines():
    raw = "first\n\n   \n\tsecond\n\t\nthird"
    assert split_lines(raw) == ["first", "\tsecond", "third"]


def test_keeps_original_line_text():
    assert split_lines("  padded  \nplain") == ["  padded  ", "plain"]


def test_empty_input():
    assert split_lines("") == []
    assert split_lines("\n\n  \n") == []


def test_crlf_blank_lines_are_dropped():
    assert split_lines("one\r\n\r\ntwo\r\n") == ["one\r", "two\r"]


def test_splitting_is_idempotent():
    raw = "a\nb  \n  c\nd"
    once = split_lines(raw)
    assert split_lines("\n".join(once)) == once
