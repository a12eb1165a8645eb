from datetime import datetime

from wechatnotify.core.record import InputRecord, parse_input, parse_timestamp


def test_header_fields_and_description():
    record = parse_input(
        b"timestamp: 1452504535\n"
        b"service:   some-service\n"
        b"event:     some-event\n"
        b"action:    some-action\n"
        b"host:      some-host\n"
        b"url:       https://example.com/a:b\n"
        b"\n"
        b"line one\n"
        b"line two\n"
    )
    assert record.timestamp == 1452504535
    assert record.service == "some-service"
    assert record.event == "some-event"
    assert record.action == "some-action"
    assert record.host == "some-host"
    assert record.url == "https://example.com/a:b"
    assert record.description == "line one\nline two"


def test_outer_whitespace_is_trimmed():
    record = parse_input(b"\n\n  host: h\n\nbody\n\n\n")
    assert record.host == "h"
    assert record.description == "body"


def test_no_header_is_all_description():
    record = parse_input(b"just some text\nover two lines")
    assert record == InputRecord(description="just some text\nover two lines")


def test_recognized_key_wipes_earlier_free_text():
    # Known quirk: free text above a header line is discarded
    record = parse_input(
        b"dropped text\n"
        b"host: web-1\n"
        b"kept text\n"
        b"\n"
        b"after blank\n"
    )
    assert record.host == "web-1"
    assert record.description == "kept text\nafter blank"


def test_text_after_last_key_survives_before_blank_line():
    record = parse_input(b"host: a\nfirst\naction: b\nsecond\nthird")
    assert record.action == "b"
    assert record.description == "second\nthird"


def test_unknown_key_is_description_text():
    record = parse_input(b"host: a\ncolor: red\n\nbody")
    assert record.host == "a"
    assert record.description == "color: red\nbody"


def test_header_lines_after_blank_line_are_description():
    record = parse_input(b"host: a\n\nbody\nhost: b\n\nmore")
    assert record.host == "a"
    assert record.description == "body\nhost: b\n\nmore"


def test_space_only_line_does_not_start_description():
    record = parse_input(b"host: a\n   \naction: b\nbody")
    assert record.host == "a"
    assert record.action == "b"
    assert record.description == "body"


def test_crlf_line_endings():
    record = parse_input(b"host: a\r\n\r\nbody\r\nmore\r\n")
    assert record.host == "a"
    assert record.description == "body\nmore"


def test_invalid_timestamp_is_zero():
    record = parse_input(b"timestamp: yesterday\n\nbody")
    assert record.timestamp == 0
    assert record.datetime == ""
    assert record.description == "body"


def test_parse_timestamp():
    assert parse_timestamp("42") == 42
    assert parse_timestamp("+42") == 42
    assert parse_timestamp("-42") == -42
    assert parse_timestamp("4.2") == 0
    assert parse_timestamp("1_000") == 0
    assert parse_timestamp("") == 0
    assert parse_timestamp(str(2 ** 63)) == 0


def test_datetime_is_local_time():
    record = InputRecord(timestamp=1452504535)
    expected = datetime.fromtimestamp(1452504535).strftime("%Y-%m-%d %H:%M:%S")
    assert record.datetime == expected
    assert len(record.datetime) == 19


def test_non_positive_timestamp_has_no_datetime():
    assert InputRecord(timestamp=0).datetime == ""
    assert InputRecord(timestamp=-5).datetime == ""


def test_utf8_input():
    record = parse_input("host: 服务器\n\n磁盘已满".encode("utf-8"))
    assert record.host == "服务器"
    assert record.description == "磁盘已满"
