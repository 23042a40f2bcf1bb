"""Line format encode/decode."""

import pytest

from timedlog.core.errors import LogDecodeError, LogLoadError
from timedlog.core.schemas import TimedEntry
from timedlog.data.codec import decode, encode


class TestEncode:
    def test_one_line_per_entry_time_first(self):
        text = encode([TimedEntry(0.0, (1.5, -2.0)), TimedEntry(0.02, (0.25, 3.0))])
        assert text.splitlines() == ["0.0,1.5,-2.0", "0.02,0.25,3.0"]

    def test_no_header_and_empty_log_is_empty_text(self):
        assert encode([]) == ""

    def test_entry_without_data_is_time_only(self):
        assert encode([TimedEntry(1.25)]) == "1.25\n"


class TestDecode:
    def test_round_trip(self):
        entries = [
            TimedEntry(0.0, (0.1, 0.2)),
            TimedEntry(0.020000001, (1e-7, -3.3333333333333335)),
            TimedEntry(1.5, (0.0, 1.0)),
        ]
        assert decode(encode(entries)) == entries

    def test_single_field_line_has_empty_data(self):
        assert decode("2.5\n") == [TimedEntry(2.5, ())]

    def test_accepts_missing_trailing_newline_and_spaces(self):
        assert decode("0, 1 ,2\n1,3,4") == [TimedEntry(0.0, (1.0, 2.0)), TimedEntry(1.0, (3.0, 4.0))]

    def test_trailing_newline_adds_no_entry(self):
        assert decode("0,1\n1,2\n") == [TimedEntry(0.0, (1.0,)), TimedEntry(1.0, (2.0,))]

    @pytest.mark.parametrize("text, line_no", [
        ("0,1\n\n1,2\n", 2),
        ("0,1\n1,2\n   \n", 3),
        ("\n0,1\n", 1),
    ])
    def test_blank_line_is_fatal(self, text, line_no):
        with pytest.raises(LogDecodeError) as exc:
            decode(text)
        assert exc.value.line_no == line_no

    @pytest.mark.parametrize("field", ["1_0", "0x10", "1.0d", "1,5e", "--1", "1e"])
    def test_loose_numeric_forms_are_fatal(self, field):
        with pytest.raises(LogDecodeError):
            decode(f"0,{field}\n")

    def test_special_values_written_by_encode_decode(self):
        entries = decode(encode([TimedEntry(0.0, (float("inf"), float("-inf"), 1e-07, -2.5e+20))]))
        assert entries[0].data[:2] == (float("inf"), float("-inf"))
        assert entries[0].data[2:] == (1e-07, -2.5e+20)

    def test_nan_is_accepted(self):
        value = decode("0,nan\n")[0].data[0]
        assert value != value

    def test_mixed_arity_is_not_validated(self):
        entries = decode("0,1,2\n1,3\n")
        assert [e.arity for e in entries] == [2, 1]

    def test_non_numeric_field_is_fatal_with_line_number(self):
        with pytest.raises(LogDecodeError) as exc:
            decode("0,1\n1,abc\n2,3\n")
        assert exc.value.line_no == 2
        assert isinstance(exc.value, LogLoadError)

    def test_empty_field_is_fatal(self):
        with pytest.raises(LogDecodeError):
            decode("0,,1\n")
