"""
Tests for the python -m odata_query entry point.
"""

import io
import json

from odata_query.__main__ import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.file == "-"
        assert args.encoded is False
        assert args.map is False


class TestMain:
    """Tests for main()."""

    def test_plain_from_stdin(self, sample_request):
        out = io.StringIO()
        rc = main([], stdin=io.StringIO(sample_request), stdout=out)
        assert rc == 0
        assert out.getvalue().strip().startswith("$search=Bakery&$filter=Name eq 'Milk'")

    def test_encoded(self):
        out = io.StringIO()
        rc = main(["--encoded"], stdin=io.StringIO('{"search": "Milk and Eggs"}'), stdout=out)
        assert rc == 0
        assert out.getvalue().strip() == "$search=Milk%20and%20Eggs"

    def test_map(self):
        out = io.StringIO()
        rc = main(["--map"], stdin=io.StringIO('{"top": 10, "count": true}'), stdout=out)
        assert rc == 0
        assert json.loads(out.getvalue()) == {"$top": "10", "$count": "true"}

    def test_from_file(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text('{"select": ["Name", "Price"]}', encoding="utf-8")
        out = io.StringIO()
        assert main([str(path)], stdout=out) == 0
        assert out.getvalue().strip() == "$select=Name,Price"

    def test_empty_request_prints_empty_line(self):
        out = io.StringIO()
        assert main([], stdin=io.StringIO("{}"), stdout=out) == 0
        assert out.getvalue() == "\n"

    def test_invalid_request(self, capsys):
        out = io.StringIO()
        rc = main([], stdin=io.StringIO('{"top": -5}'), stdout=out)
        assert rc == 2
        assert out.getvalue() == ""
        assert "top" in capsys.readouterr().err

    def test_invalid_json(self):
        assert main([], stdin=io.StringIO("{oops"), stdout=io.StringIO()) == 2

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "nope.json")], stdout=io.StringIO()) == 2
