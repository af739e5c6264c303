"""Tests for the CSV codec."""

from liftlog.generators.workout_csv import workouts_to_csv
from liftlog.models.workout import WorkoutRecord
from liftlog.utils.csv_codec import (
    decode_records,
    encode_rows,
    escape_field,
    format_value,
    get_field,
    parse_rows,
)

HEADER = "id,name,weight,sets,reps,notes,supersetParentId,altParentId,day,dayOrder"


class TestEscapeField:
    """Tests for escape_field."""

    def test_plain_field_unchanged(self):
        assert escape_field("Bench Press") == "Bench Press"

    def test_comma_is_quoted(self):
        assert escape_field("Press, incline") == '"Press, incline"'

    def test_quotes_are_doubled(self):
        assert escape_field('The "big" lift') == '"The ""big"" lift"'

    def test_newline_is_quoted(self):
        assert escape_field("line1\nline2") == '"line1\nline2"'


class TestFormatValue:
    """Tests for format_value."""

    def test_none_is_empty(self):
        assert format_value(None) == ""

    def test_integral_float_drops_decimal(self):
        assert format_value(135.0) == "135"

    def test_fractional_float(self):
        assert format_value(47.5) == "47.5"

    def test_int(self):
        assert format_value(3) == "3"


class TestParseRows:
    """Tests for the CSV tokenizer."""

    def test_simple_rows(self):
        assert parse_rows("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_trailing_newline_adds_no_row(self):
        assert parse_rows("a,b\n") == [["a", "b"]]

    def test_crlf_line_endings(self):
        assert parse_rows("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_quoted_comma_and_newline(self):
        rows = parse_rows('x,"a, b\nc",y')
        assert rows == [["x", "a, b\nc", "y"]]

    def test_doubled_quote(self):
        assert parse_rows('"say ""hi"""') == [['say "hi"']]

    def test_empty_fields(self):
        assert parse_rows("a,,c") == [["a", "", "c"]]

    def test_empty_input(self):
        assert parse_rows("") == []

    def test_unterminated_quote_consumes_rest(self):
        """Malformed quoting does not raise."""
        rows = parse_rows('a,"unterminated\nb,c')
        assert rows == [["a", "unterminated\nb,c"]]


class TestDecodeRecords:
    """Tests for header-keyed decoding."""

    def test_header_only(self):
        assert decode_records(HEADER) == []
        assert decode_records(HEADER + "\n") == []

    def test_empty_input(self):
        assert decode_records("") == []

    def test_maps_by_header_name(self):
        records = decode_records("name,id\nSquat,w1")
        assert records == [{"name": "Squat", "id": "w1"}]

    def test_header_names_are_trimmed(self):
        records = decode_records(" id , name \nw1,Squat")
        assert records[0]["id"] == "w1"
        assert records[0]["name"] == "Squat"

    def test_short_row_padded(self):
        records = decode_records("id,name,notes\nw1,Squat")
        assert records[0]["notes"] == ""

    def test_blank_lines_skipped(self):
        records = decode_records("id,name\nw1,Squat\n\nw2,Deadlift\n")
        assert [r["id"] for r in records] == ["w1", "w2"]

    def test_missing_column_reads_empty(self):
        records = decode_records("id,name\nw1,Squat")
        assert get_field(records[0], "notes") == ""


class TestEncodeRows:
    """Tests for encode_rows."""

    def test_no_trailing_newline(self):
        text = encode_rows(["a", "b"], [[1, "x"], [2, None]])
        assert text == "a,b\n1,x\n2,"

    def test_round_trip_awkward_strings(self):
        values = [
            'comma, here', 'quote " here', "new\nline", '"", ,\n',
            "slow\rpause", "crlf\r\nend",
        ]
        text = encode_rows(["v"], [[v] for v in values])
        assert [r["v"] for r in decode_records(text)] == values

    def test_lone_carriage_return_is_quoted(self):
        assert escape_field("slow\rpause") == '"slow\rpause"'

    def test_byte_order_mark_on_header_ignored(self):
        records = decode_records("\ufeffid,name\nw1,Squat")
        assert records == [{"id": "w1", "name": "Squat"}]


class TestWorkoutsToCsv:
    """Tests for the workout CSV generator."""

    def test_header_only_for_empty_list(self):
        assert workouts_to_csv([]) == HEADER

    def test_row_layout(self):
        workout = WorkoutRecord(
            id="w2", name="Incline DB Press", weight=50, sets=3, reps=10,
            day=1, day_order=1, superset_parent_id="w1",
        )
        lines = workouts_to_csv([workout]).split("\n")
        assert lines[0] == HEADER
        assert lines[1] == "w2,Incline DB Press,50,3,10,,w1,,1,1"

    def test_notes_with_comma_are_quoted(self):
        workout = WorkoutRecord(id="w1", name="Row", notes="Slow, controlled")
        row = workouts_to_csv([workout]).split("\n")[1]
        assert '"Slow, controlled"' in row

    def test_fractional_weight(self):
        workout = WorkoutRecord(id="w1", name="Curl", weight=27.5)
        assert workouts_to_csv([workout]).split("\n")[1].startswith("w1,Curl,27.5,")
