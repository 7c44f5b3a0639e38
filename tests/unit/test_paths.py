"""Tests for path normalization."""

from stacksnap.config.schema import CaptureSettings
from stacksnap.core.paths import PathNormalizer


class TestPathNormalizer:
    """Test PathNormalizer prefix stripping."""

    def test_strips_configured_root(self) -> None:
        """Test a path under a configured root becomes relative."""
        normalizer = PathNormalizer(["/usr/lib/gopath/src"])

        assert normalizer.normalize("/usr/lib/gopath/src/app/main.go") == "app/main.go"

    def test_prefix_with_trailing_separator(self) -> None:
        """Test prefixes already ending in a separator are used as-is."""
        normalizer = PathNormalizer(["/srv/"])

        assert normalizer.prefixes == ("/srv/",)
        assert normalizer.normalize("/srv/app/main.py") == "app/main.py"

    def test_does_not_match_partial_segment(self) -> None:
        """Test a prefix only matches whole directory names."""
        normalizer = PathNormalizer(["/usr/lib"])

        assert normalizer.normalize("/usr/libx/mod.py") == "/usr/libx/mod.py"

    def test_first_matching_prefix_wins(self) -> None:
        """Test prefixes are tried in order."""
        normalizer = PathNormalizer(["/opt", "/opt/app"])

        assert normalizer.normalize("/opt/app/main.py") == "app/main.py"

    def test_falls_through_to_later_prefix(self) -> None:
        """Test non-matching prefixes are skipped."""
        normalizer = PathNormalizer(["/usr/lib/python3.11", "/srv/project"])

        assert normalizer.normalize("/srv/project/pkg/mod.py") == "pkg/mod.py"

    def test_unmatched_path_unchanged(self) -> None:
        """Test paths outside every root are returned unchanged."""
        normalizer = PathNormalizer(["/usr/lib/python3.11"])

        assert normalizer.normalize("/home/user/app.py") == "/home/user/app.py"
        assert normalizer.normalize("<string>") == "<string>"

    def test_empty_prefixes_ignored(self) -> None:
        """Test empty prefixes never strip leading separators."""
        normalizer = PathNormalizer(["", "/srv"])

        assert normalizer.prefixes == ("/srv/",)
        assert normalizer.normalize("/home/app.py") == "/home/app.py"

    def test_idempotent_and_never_longer(self) -> None:
        """Test normalizing twice changes nothing and never lengthens paths."""
        normalizer = PathNormalizer(["/usr/lib/python3.11", "/srv/project"])
        paths = [
            "/usr/lib/python3.11/json/decoder.py",
            "/srv/project/app/main.py",
            "/elsewhere/file.py",
            "relative/file.py",
        ]

        for path in paths:
            once = normalizer.normalize(path)
            assert normalizer.normalize(once) == once
            assert len(once) <= len(path)

    def test_from_settings(self) -> None:
        """Test building from settings uses stdlib root then library path."""
        settings = CaptureSettings(stdlib_root="/usr/lib/python3.11", library_path="/srv/a:/srv/b")
        normalizer = PathNormalizer.from_settings(settings)

        assert normalizer.prefixes == ("/usr/lib/python3.11/", "/srv/a/", "/srv/b/")
        assert normalizer.normalize("/srv/b/pkg/mod.py") == "pkg/mod.py"
