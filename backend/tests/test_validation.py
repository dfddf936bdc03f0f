import pytest

from pvz.validation import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    ValidationError,
    parse_choice,
    parse_pagination,
    parse_uuid,
    validate_email,
)


class TestPagination:

    def test_defaults(self):
        query = parse_pagination({})
        assert query.page == DEFAULT_PAGE
        assert query.limit == DEFAULT_LIMIT
        assert query.start_date is None
        assert query.end_date is None

    def test_empty_values_use_defaults(self):
        query = parse_pagination({"page": "", "limit": ""})
        assert (query.page, query.limit) == (DEFAULT_PAGE, DEFAULT_LIMIT)

    @pytest.mark.parametrize("limit", ["1", str(MAX_LIMIT)])
    def test_limit_bounds_accepted(self, limit):
        assert parse_pagination({"limit": limit}).limit == int(limit)

    @pytest.mark.parametrize("args", [
        {"page": "0"},
        {"page": "-1"},
        {"limit": "0"},
        {"limit": str(MAX_LIMIT + 1)},
        {"page": "abc"},
        {"limit": "2.5"},
        {"limit": "1e1"},
    ])
    def test_out_of_range_or_garbage(self, args):
        with pytest.raises(ValidationError):
            parse_pagination(args)

    def test_huge_page_parses(self):
        assert parse_pagination({"page": str(10 ** 20)}).page == 10 ** 20

    def test_overlong_integer_rejected(self):
        with pytest.raises(ValidationError, match="page"):
            parse_pagination({"page": "9" * 5000})

    def test_dates_are_normalized_to_utc(self):
        query = parse_pagination({
            "startDate": "2025-01-01T03:00:00+03:00",
            "endDate": "2025-01-02T00:00:00Z",
        })
        assert query.start_date.isoformat() == "2025-01-01T00:00:00"
        assert query.end_date.isoformat() == "2025-01-02T00:00:00"

    def test_equal_dates_allowed(self):
        query = parse_pagination({
            "startDate": "2025-01-01T00:00:00Z",
            "endDate": "2025-01-01T00:00:00Z",
        })
        assert query.start_date == query.end_date

    def test_start_after_end_rejected(self):
        with pytest.raises(ValidationError, match="startDate"):
            parse_pagination({
                "startDate": "2025-02-01T00:00:00Z",
                "endDate": "2025-01-01T00:00:00Z",
            })

    def test_bad_date(self):
        with pytest.raises(ValidationError, match="endDate"):
            parse_pagination({"endDate": "yesterday"})


class TestScalars:

    def test_uuid_canonicalized(self):
        value = "0A1B2C3D-0000-4000-8000-000000000000"
        assert parse_uuid(value) == value.lower()

    @pytest.mark.parametrize("value", [None, "", "   ", "not-a-uuid", 42])
    def test_uuid_rejected(self, value):
        with pytest.raises(ValidationError, match="pvzId"):
            parse_uuid(value, "pvzId")

    def test_choice(self):
        assert parse_choice("b", ("a", "b"), "x") == "b"
        with pytest.raises(ValidationError):
            parse_choice("c", ("a", "b"), "x")

    def test_email_lowercased(self):
        assert validate_email(" Someone@Example.COM ") == "someone@example.com"

    @pytest.mark.parametrize("value", [None, "", "no-at-sign", "a@b", "a b@c.d"])
    def test_email_rejected(self, value):
        with pytest.raises(ValidationError):
            validate_email(value)
