"""Tests for attachment resolution."""

from pdfblock.blocks.media import MediaLibrary, MediaResolver


class TestMediaLibrary:
    def test_resolves_known_id(self) -> None:
        library = MediaLibrary({123: "https://site/files/doc.pdf"})

        assert library.resolve(123) == "https://site/files/doc.pdf"

    def test_numeric_string_id(self) -> None:
        library = MediaLibrary({123: "https://site/files/doc.pdf"})

        assert library.resolve("123") == "https://site/files/doc.pdf"
        assert library.resolve(" 123 ") == "https://site/files/doc.pdf"

    def test_unknown_and_invalid_ids_resolve_to_none(self) -> None:
        library = MediaLibrary({123: "https://site/files/doc.pdf"})

        assert library.resolve(999) is None
        assert library.resolve(None) is None
        assert library.resolve("abc") is None
        assert library.resolve(True) is None
        assert library.resolve(1.5) is None

    def test_oversized_and_non_ascii_digit_strings_resolve_to_none(self) -> None:
        library = MediaLibrary({2: "https://site/two.pdf"})

        assert library.resolve("\u00b2") is None
        assert library.resolve("9" * 5000) is None
        assert library.resolve("\u0662") is None

    def test_add(self) -> None:
        library = MediaLibrary()
        library.add(7, "https://site/files/seven.pdf")

        assert len(library) == 1
        assert library.resolve(7) == "https://site/files/seven.pdf"

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MediaLibrary(), MediaResolver)
