from mdit_common.sourcemap import SourcePos, SourceWithLineStarts


def test_no_linebreaks():
    source_map = SourceWithLineStarts("qwertyuiopasdfghjklzxcvbnmQWERTYUIOPASDFGHJKLZXCVBNM")
    for i in range(20):
        assert SourcePos(i, 0).positions(source_map)[0] == (1, i + 1)


def test_unicode():
    source_map = SourceWithLineStarts("!ΑαΒβΓγΔδΕεΖζΗηΘθΙιΚκΛλΜμΝνΞξΟοΠπΡρΣσςΤτΥυΦφΧχΨψΩω")
    assert SourcePos(0, 0).positions(source_map)[0] == (1, 1)
    for i in range(1, 20):
        assert SourcePos(i, 0).positions(source_map)[0] == (1, (i - 1) // 2 + 2)


def test_many_linebreaks():
    source_map = SourceWithLineStarts("\n\n\n\n\n\n123")
    for i in range(6):
        assert SourcePos(i, 0).positions(source_map)[0] == (i + 2, 0)
    assert SourcePos(7, 0).positions(source_map)[0] == (7, 2)
    assert SourcePos(8, 0).positions(source_map)[0] == (7, 3)


def test_after_end():
    assert SourcePos(100, 0).positions(SourceWithLineStarts("123"))[0] == (1, 3)
    assert SourcePos(100, 0).positions(SourceWithLineStarts("123\n"))[0] == (2, 0)
    assert SourcePos(100, 0).positions(SourceWithLineStarts("123\n456"))[0] == (2, 3)


def test_end_position_uses_last_included_char():
    source_map = SourceWithLineStarts("foo\nbar")
    assert SourcePos(0, 3).positions(source_map) == ((1, 1), (1, 3))
    assert SourcePos(4, 7).positions(source_map) == ((2, 1), (2, 3))


def test_crlf_counts_as_one_linebreak():
    source_map = SourceWithLineStarts("ab\r\ncd")
    assert source_map.position(4) == (2, 1)
    assert source_map.position(1) == (1, 2)


def test_long_line_past_column_marks():
    source_map = SourceWithLineStarts("x" * 40)
    assert source_map.position(35) == (1, 36)


def test_byte_offsets_and_repr():
    pos = SourcePos(3, 9)
    assert pos.byte_offsets == (3, 9)
    assert repr(pos) == "(3, 9)"