"""
Tests for the command line entry point.
"""
from lipsum.cli import main, parse_count


class TestParseCount:
    """Test suite for word count parsing."""

    def test_valid(self):
        """Test plain integers."""
        assert parse_count("40") == 40
        assert parse_count("0") == 0

    def test_fallback(self):
        """Test missing or invalid counts mean 25."""
        assert parse_count(None) == 25
        assert parse_count("many") == 25
        assert parse_count("-3") == 25


class TestMain:
    """Test suite for main()."""

    def test_default(self, capsys):
        """Test default output is 25 classical words."""
        assert main([]) == 0
        out = capsys.readouterr().out.strip()

        assert out.startswith("Lorem ipsum")
        assert len(out.split()) == 25

    def test_count(self, capsys):
        """Test an explicit word count."""
        main(["3"])

        assert capsys.readouterr().out.strip() == "Lorem ipsum dolor"

    def test_invalid_count(self, capsys):
        """Test an invalid count falls back to 25."""
        main(["lots"])

        assert len(capsys.readouterr().out.split()) == 25

    def test_seeded_words(self, capsys):
        """Test seeded prose is reproducible."""
        main(["20", "--mode", "words", "--seed", "5"])
        first = capsys.readouterr().out
        main(["20", "--mode", "words", "--seed", "5"])

        assert capsys.readouterr().out == first

    def test_title(self, capsys):
        """Test title mode."""
        main(["--mode", "title", "--seed", "1"])

        assert 3 <= len(capsys.readouterr().out.split()) <= 7

    def test_train_file(self, corpus_path, capsys):
        """Test generating from a chain trained on a file."""
        assert main(["12", "--train", str(corpus_path), "--seed", "2"]) == 0
        words = capsys.readouterr().out.split()

        assert len(words) == 12

    def test_missing_file(self, tmp_path, capsys):
        """Test a missing training file is reported."""
        assert main(["--train", str(tmp_path / "nope.txt")]) == 2
        assert "Error" in capsys.readouterr().err

    def test_bad_order(self, corpus_path, capsys):
        """Test order zero is reported."""
        assert main(["--train", str(corpus_path), "--order", "0"]) == 2

    def test_non_utf8_file(self, tmp_path, capsys):
        """Test an undecodable training file is reported."""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9 cr\xe8me br\xfbl\xe9e \xff\xfe")

        assert main(["--train", str(path)]) == 2
        assert "Error" in capsys.readouterr().err

    def test_title_from_punctuation_file(self, tmp_path, capsys):
        """Test a title from a chain with no words is reported."""
        path = tmp_path / "marks.txt"
        path.write_text(". , ; ! ? . ,", encoding="utf-8")

        assert main(["--mode", "title", "--train", str(path)]) == 2
        assert "Error" in capsys.readouterr().err
