import pytest

from dockey._keys import encode_key
from dockey._transform import chain, to_lower


class TestToLower:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("HeLLo", "hello"),
            ("", ""),
            ("ÉTÉ", "été"),
            ("ΣΊΣΥΦΟΣ", "σίσυφοσ"),
            ("ΟΔΟΣ ς", "οδοσ ς"),
            ("İSTANBUL", "istanbul"),
            ("already lower", "already lower"),
            ("MiXeD 123 !?", "mixed 123 !?"),
        ],
        ids=[
            "ascii",
            "empty",
            "accented",
            "greek_sigma_not_final",
            "final_sigma_kept",
            "dotted_capital_i",
            "unchanged",
            "non_letters",
        ],
    )
    def test_text(self, value: str, expected: str) -> None:
        assert to_lower(value) == expected

    def test_bytes(self) -> None:
        assert to_lower(b"HeLLo") == "hello"

    def test_key(self) -> None:
        assert to_lower(encode_key("CAFÉ")) == "café"

    def test_bytearray(self) -> None:
        assert to_lower(bytearray(b"ABC")) == "abc"

    def test_lowered_key_encodes_to_lowered_text_key(self) -> None:
        assert encode_key(to_lower(encode_key("ΣΟΦΊΑΣ"))) == encode_key("σοφίασ")

    def test_invalid_utf8_replaced(self) -> None:
        assert to_lower(b"A\xff") == "a\ufffd"

    @pytest.mark.parametrize(
        "value",
        [1.5, 42, None, True, ["ABC"], {"A": "B"}],
        ids=["float", "int", "none", "bool", "list", "dict"],
    )
    def test_other_types_unchanged(self, value: object) -> None:
        assert to_lower(value) is value

    @pytest.mark.parametrize(
        "value",
        ["HeLLo", b"HeLLo", "İSTANBUL", 3.0],
        ids=["text", "bytes", "dotted_capital_i", "float"],
    )
    def test_idempotent(self, value: object) -> None:
        once = to_lower(value)
        assert to_lower(once) == once


class TestChain:
    def test_empty_chain_is_identity(self) -> None:
        identity = chain()
        assert identity("AbC") == "AbC"

    def test_applies_left_to_right(self) -> None:
        calls: list[str] = []

        def first(value: object) -> object:
            calls.append("first")
            return f"{value}-1"

        def second(value: object) -> object:
            calls.append("second")
            return f"{value}-2"

        assert chain(first, second)("x") == "x-1-2"
        assert calls == ["first", "second"]

    def test_lower_then_encode(self) -> None:
        to_key = chain(to_lower, encode_key)
        assert to_key("HELLO") == b"hello"
