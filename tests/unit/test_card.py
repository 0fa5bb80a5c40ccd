"""Tests for the 80-column card aggregate."""

import pytest

from punchcard.core.card import BLANK_COLUMN, CardType, Column, PunchCard
from punchcard.domain import EMPTY_PATTERN, VALID_ROWS, PunchPattern
from punchcard.exceptions import ColumnIndexError, PunchCardError


@pytest.fixture
def hello_card() -> PunchCard:
    """Create a text card punched with HELLO."""
    return PunchCard.from_text("HELLO")


@pytest.fixture
def full_dense_buffer() -> bytes:
    """Create a dense buffer with every bit set."""
    return b"\xff" * 108


class TestColumn:
    """Tests for Column."""

    def test_blank_column(self) -> None:
        """Test the default column is blank with no printed character."""
        column = Column()
        assert column.is_blank
        assert column.printed_char is None
        assert column == BLANK_COLUMN

    def test_from_char(self) -> None:
        """Test keying a character sets pattern and printed character."""
        column = Column.from_char("A")
        assert not column.is_blank
        assert column.printed_char == "A"
        assert column.to_char() == "A"

    def test_from_char_lowercase(self) -> None:
        """Test keyed characters are upcased."""
        column = Column.from_char("a")
        assert column.printed_char == "A"
        assert column.to_char() == "A"

    def test_from_char_unsupported(self) -> None:
        """Test unsupported characters are blank but still printed."""
        column = Column.from_char("~")
        assert column.is_blank
        assert column.printed_char == "~"

    def test_from_pattern(self) -> None:
        """Test raw punches carry no printed character."""
        column = Column.from_pattern(PunchPattern.of(12, 1))
        assert column.printed_char is None
        assert column.to_char() == "A"

    def test_to_char_unsupported_pattern(self) -> None:
        """Test undecodable punches give None."""
        assert Column.from_pattern(PunchPattern.of(12, 11, 0)).to_char() is None

    def test_serialization(self) -> None:
        """Test column serialization and deserialization."""
        column = Column.from_char(".")
        data = column.to_dict()
        assert data == {"pattern": {"rows": [3, 8, 12]}, "printed_char": "."}
        assert Column.from_dict(data) == column

    @pytest.mark.parametrize("char", ["", "AB", "hello"])
    def test_from_char_requires_single_character(self, char: str) -> None:
        """Test keying anything but one character is rejected."""
        with pytest.raises(ValueError, match="single character"):
            Column.from_char(char)

    @pytest.mark.parametrize("printed_char", ["", "AB", 5])
    def test_printed_char_must_be_single_character(self, printed_char: object) -> None:
        """Test a column cannot carry more or less than one printed character."""
        with pytest.raises(ValueError, match="single character"):
            Column(printed_char=printed_char)  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="single character"):
            Column.from_dict({"pattern": {"rows": []}, "printed_char": printed_char})


class TestCardConstruction:
    """Tests for creating cards."""

    def test_new_text_card(self) -> None:
        """Test a new card is blank with the given type."""
        card = PunchCard.new(CardType.TEXT)
        assert card.card_type is CardType.TEXT
        assert card.punched_count() == 0
        assert len(card) == 80
        assert len(card.columns) == 80

    def test_new_binary_card(self) -> None:
        """Test a new binary card."""
        card = PunchCard(CardType.BINARY)
        assert card.card_type is CardType.BINARY
        assert all(column == BLANK_COLUMN for column in card)

    def test_from_text(self, hello_card: PunchCard) -> None:
        """Test keying a string."""
        assert hello_card.card_type is CardType.TEXT
        assert hello_card.punched_count() == 5
        assert hello_card.get_column(0).to_char() == "H"  # type: ignore[union-attr]
        assert hello_card.get_column(4).to_char() == "O"  # type: ignore[union-attr]
        assert hello_card.get_column(5) == BLANK_COLUMN

    def test_from_text_truncates_at_80(self) -> None:
        """Test characters beyond column 80 are dropped."""
        card = PunchCard.from_text("A" * 100)
        assert card.punched_count() == 80

    def test_from_text_lowercase(self) -> None:
        """Test keyed text is upcased."""
        card = PunchCard.from_text("hello")
        assert card.to_text().startswith("HELLO")
        assert card.printed_text().startswith("HELLO")

    def test_from_text_unsupported(self) -> None:
        """Test unsupported characters leave blank columns."""
        card = PunchCard.from_text("A~B")
        assert card.punched_count() == 2
        assert card.get_column(1).is_blank  # type: ignore[union-attr]
        assert card.get_column(1).printed_char == "~"  # type: ignore[union-attr]
        assert card.to_text().startswith("A B")

    def test_from_binary_dense_all_zero(self) -> None:
        """Test an all-zero dense buffer gives a blank binary card."""
        card = PunchCard.from_binary(bytes(108))
        assert card.card_type is CardType.BINARY
        assert card.punched_count() == 0

    def test_from_binary_dense_all_set(self, full_dense_buffer: bytes) -> None:
        """Test a full dense buffer punches exactly columns 1-72."""
        card = PunchCard.from_binary(full_dense_buffer)
        assert card.punched_count() == 72
        full = PunchPattern.from_rows(VALID_ROWS)
        assert all(card.get_column(i).pattern == full for i in range(72))  # type: ignore[union-attr]
        assert all(card.get_column(i).is_blank for i in range(72, 80))  # type: ignore[union-attr]

    def test_from_binary_no_printed_chars(self, full_dense_buffer: bytes) -> None:
        """Test binary columns never carry a printed character."""
        card = PunchCard.from_binary(full_dense_buffer)
        assert all(column.printed_char is None for column in card)

    def test_from_binary_legacy(self) -> None:
        """Test a short buffer is read one byte per column."""
        card = PunchCard.from_binary(bytes([0b1010_1010, 0b0101_0101]))
        assert card.card_type is CardType.BINARY
        assert card.punched_count() == 2
        assert card.get_column(0).pattern == PunchPattern.of(11, 1, 3, 5)  # type: ignore[union-attr]
        assert card.get_column(1).pattern == PunchPattern.of(12, 0, 2, 4)  # type: ignore[union-attr]

    def test_from_binary_legacy_80_bytes(self) -> None:
        """Test an 80-byte legacy buffer fills all 80 columns."""
        card = PunchCard.from_binary(b"\x01" * 80)
        assert card.punched_count() == 80
        assert all(column.pattern == PunchPattern.of(12) for column in card)

    def test_from_binary_160_bytes_is_legacy(self) -> None:
        """Test the retired 160-byte layout is read as legacy bytes."""
        card = PunchCard.from_binary(b"\xff" * 160)
        assert card.punched_count() == 80
        assert card.get_column(0).pattern == PunchPattern.of(12, 11, 0, 1, 2, 3, 4, 5)  # type: ignore[union-attr]

    def test_from_ebcdic(self) -> None:
        """Test EBCDIC bytes give patterns and printed characters."""
        card = PunchCard.from_ebcdic(bytes([0xC8, 0xC9, 0x40, 0xF1]))
        assert card.card_type is CardType.TEXT
        assert card.to_text().startswith("HI 1")
        assert card.printed_text().startswith("HI 1")
        assert card.punched_count() == 3

    def test_from_ebcdic_unknown_byte(self) -> None:
        """Test an unknown byte gives a blank column with no printed character."""
        card = PunchCard.from_ebcdic(bytes([0x00]))
        column = card.get_column(0)
        assert column is not None
        assert column.is_blank
        assert column.printed_char is None

    def test_from_ebcdic_special_has_pattern_but_no_printed_char(self) -> None:
        """Test 0x61 punches a slash without a printed character."""
        column = PunchCard.from_ebcdic(bytes([0x61])).get_column(0)
        assert column is not None
        assert column.pattern == PunchPattern.of(0, 1)
        assert column.printed_char is None

    def test_from_ebcdic_truncates_at_80(self) -> None:
        """Test bytes beyond column 80 are ignored."""
        card = PunchCard.from_ebcdic(b"\xc1" * 100)
        assert card.punched_count() == 80

    def test_from_ebcdic_short_buffer(self) -> None:
        """Test remaining columns stay blank without printed characters."""
        card = PunchCard.from_ebcdic(b"\xc1")
        assert card.get_column(1) == BLANK_COLUMN


class TestCardExport:
    """Tests for exporting cards."""

    def test_to_binary_size(self, hello_card: PunchCard) -> None:
        """Test binary export is always 108 bytes."""
        assert len(hello_card.to_binary()) == 108
        assert len(PunchCard().to_binary()) == 108

    def test_to_binary_round_trip(self, hello_card: PunchCard) -> None:
        """Test punches in columns 1-72 survive a binary round trip."""
        card = PunchCard.from_binary(hello_card.to_binary())
        assert card.card_type is CardType.BINARY
        assert card.to_text() == hello_card.to_text()

    def test_to_binary_drops_columns_beyond_72(self) -> None:
        """Test columns 73-80 are lost in the dense layout."""
        card = PunchCard.from_text("X" * 80)
        restored = PunchCard.from_binary(card.to_binary())
        assert restored.punched_count() == 72
        assert all(restored.get_column(i).is_blank for i in range(72, 80))  # type: ignore[union-attr]

    def test_to_binary_fixed_point(self) -> None:
        """Test binary export is stable after the first pass."""
        card = PunchCard.from_binary(bytes(range(80)))
        first = card.to_binary()
        second = PunchCard.from_binary(first).to_binary()
        assert second == first
        assert PunchCard.from_binary(second).to_binary() == second

    def test_to_binary_known_bits(self) -> None:
        """Test the first column's row 12 is bit 0 of byte 0."""
        card = PunchCard(CardType.BINARY)
        card.set_column_pattern(0, PunchPattern.of(12))
        data = card.to_binary()
        assert data[0] == 0x01
        assert sum(data) == 0x01

    def test_to_ebcdic(self, hello_card: PunchCard) -> None:
        """Test EBCDIC export gives one byte per column."""
        data = hello_card.to_ebcdic()
        assert len(data) == 80
        assert data[:5] == bytes([0xC8, 0xC5, 0xD3, 0xD3, 0xD6])
        assert data[5:] == b"\x40" * 75

    def test_to_ebcdic_binary_card(self, full_dense_buffer: bytes) -> None:
        """Test binary cards export EBCDIC too, unmapped punches as space."""
        data = PunchCard.from_binary(full_dense_buffer).to_ebcdic()
        assert data == b"\x40" * 80

    def test_ebcdic_round_trip(self) -> None:
        """Test letters and digits survive an EBCDIC round trip."""
        card = PunchCard.from_text("HELLO WORLD 123")
        restored = PunchCard.from_ebcdic(card.to_ebcdic())
        assert restored.to_text() == card.to_text()

    def test_to_text(self) -> None:
        """Test text export covers all 80 columns."""
        text = PunchCard.from_text("HELLO WORLD").to_text()
        assert len(text) == 80
        assert text.startswith("HELLO WORLD")
        assert text[11:] == " " * 69

    def test_to_text_binary_card(self) -> None:
        """Test undecodable binary columns render as '?'."""
        card = PunchCard.from_binary(b"\xff" * 108)
        text = card.to_text()
        assert text[:72] == "?" * 72
        assert text[72:] == " " * 8

    def test_printed_text(self) -> None:
        """Test printed characters, with spaces where nothing is printed."""
        card = PunchCard.from_text("AB")
        card.set_column_pattern(3, PunchPattern.of(12, 3))
        assert card.printed_text().startswith("AB  ")
        assert card.to_text().startswith("AB C")


class TestCardMutation:
    """Tests for editing cards."""

    def test_set_column_char(self) -> None:
        """Test keying a single column."""
        card = PunchCard(CardType.TEXT)
        card.set_column_char(0, "A")
        assert card.get_column(0).to_char() == "A"  # type: ignore[union-attr]
        assert card.get_column(0).printed_char == "A"  # type: ignore[union-attr]

    def test_set_column_char_multiple_characters(self, hello_card: PunchCard) -> None:
        """Test keying several characters into one column keeps the card 80 wide."""
        before = hello_card.to_dict()
        with pytest.raises(ValueError):
            hello_card.set_column_char(0, "AB")
        assert hello_card.to_dict() == before
        assert len(hello_card.printed_text()) == 80

    def test_set_column_pattern(self) -> None:
        """Test punching a raw pattern."""
        card = PunchCard(CardType.BINARY)
        card.set_column_pattern(79, PunchPattern.of(0, 9))
        column = card.get_column(79)
        assert column == Column(pattern=PunchPattern.of(0, 9))

    @pytest.mark.parametrize("index", [80, 100, -1])
    def test_out_of_range_leaves_card_unchanged(self, hello_card: PunchCard, index: int) -> None:
        """Test mutators reject indices outside 0-79."""
        before = hello_card.to_dict()
        with pytest.raises(ColumnIndexError):
            hello_card.set_column_char(index, "A")
        with pytest.raises(ColumnIndexError):
            hello_card.set_column_pattern(index, PunchPattern.of(12))
        with pytest.raises(ColumnIndexError):
            hello_card.clear_column(index)
        assert hello_card.to_dict() == before

    def test_index_error_types(self) -> None:
        """Test ColumnIndexError is an IndexError and a PunchCardError."""
        card = PunchCard()
        with pytest.raises(IndexError, match="out of range"):
            card.set_column_char(80, "A")
        with pytest.raises(PunchCardError):
            card.clear_column(80)

    def test_get_column_out_of_range(self) -> None:
        """Test reading outside the card gives None."""
        card = PunchCard()
        assert card.get_column(80) is None
        assert card.get_column(-1) is None

    def test_clear_column(self, hello_card: PunchCard) -> None:
        """Test clearing one column."""
        hello_card.clear_column(0)
        assert hello_card.get_column(0) == BLANK_COLUMN
        assert hello_card.punched_count() == 4

    def test_clear(self, hello_card: PunchCard) -> None:
        """Test clearing the whole card keeps the type."""
        hello_card.clear()
        assert hello_card.punched_count() == 0
        assert hello_card.card_type is CardType.TEXT
        assert all(column.printed_char is None for column in hello_card)

    def test_clear_binary_card(self, full_dense_buffer: bytes) -> None:
        """Test clearing a binary card keeps the binary type."""
        card = PunchCard.from_binary(full_dense_buffer)
        card.clear()
        assert card.punched_count() == 0
        assert card.card_type is CardType.BINARY

    def test_columns_view_is_a_copy(self, hello_card: PunchCard) -> None:
        """Test the columns tuple does not change with later edits."""
        columns = hello_card.columns
        hello_card.clear()
        assert columns[0].to_char() == "H"


class TestCardSerialization:
    """Tests for card dictionaries and equality."""

    def test_round_trip(self, hello_card: PunchCard) -> None:
        """Test dictionary round trip preserves type, punches and printed chars."""
        restored = PunchCard.from_dict(hello_card.to_dict())
        assert restored == hello_card
        assert restored.printed_text() == hello_card.printed_text()

    def test_to_dict_shape(self) -> None:
        """Test the dictionary layout."""
        data = PunchCard(CardType.BINARY).to_dict()
        assert data["card_type"] == "binary"
        assert len(data["columns"]) == 80
        assert data["columns"][0] == {"pattern": {"rows": []}, "printed_char": None}

    def test_from_dict_short_column_list(self) -> None:
        """Test missing columns are blank."""
        card = PunchCard.from_dict(
            {"card_type": "text", "columns": [{"pattern": {"rows": [12, 1]}, "printed_char": "A"}]}
        )
        assert card.to_text().startswith("A ")
        assert card.punched_count() == 1

    def test_equality_includes_type(self) -> None:
        """Test cards with equal columns but different types differ."""
        assert PunchCard(CardType.TEXT) != PunchCard(CardType.BINARY)
        assert PunchCard(CardType.TEXT) == PunchCard(CardType.TEXT)

    def test_equality_includes_printed_chars(self) -> None:
        """Test punches alone do not make cards equal."""
        keyed = PunchCard.from_text("A")
        punched = PunchCard(CardType.TEXT)
        punched.set_column_pattern(0, PunchPattern.of(12, 1))
        assert keyed != punched
        assert keyed.to_text() == punched.to_text()

    def test_blank_pattern_constant(self) -> None:
        """Test blank columns use the shared empty pattern."""
        assert PunchCard().get_column(0).pattern == EMPTY_PATTERN  # type: ignore[union-attr]
